"""CSV adapter for per-person task lists."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from pathlib import Path

from workload_dashboard import config
from workload_dashboard.schema import TaskRecord

logger = logging.getLogger(__name__)


def parse_date(value: str | None, year: int) -> date | None:
    """Parse a ``3月15日`` style cell into a date of ``year``; anything else is absent."""

    if not value or value == config.ABSENT_DATE:
        return None

    match = config.DATE_PATTERN.match(value)
    if not match:
        return None

    month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def derive_status(est_end: date | None, actual_end: date | None, now: datetime) -> str:
    if actual_end is not None:
        return config.STATUS_COMPLETED
    if est_end is None:
        return config.STATUS_PENDING
    # planned dates carry no time, so they count from midnight of now's own day
    today = now.date()
    if est_end < today or (est_end == today and now.time() != time.min):
        return config.STATUS_DELAYED
    return config.STATUS_PENDING


def _parse_row(row: dict, line_index: int, now: datetime) -> TaskRecord | None:
    category = row.get(config.HEADER_CATEGORY, "")
    item = row.get(config.HEADER_ITEM, "")
    if not category or not item:
        logger.debug("Line %d: missing category or item, skipped", line_index)
        return None

    est_start = parse_date(row.get(config.HEADER_EST_START), now.year)
    est_end = parse_date(row.get(config.HEADER_EST_END), now.year)
    actual_end = parse_date(row.get(config.HEADER_ACTUAL_END), now.year)

    return TaskRecord(
        id=f"{category}-{item}-{line_index}",
        category=category,
        item=item,
        estimated_time=row.get(config.HEADER_ESTIMATED_TIME, ""),
        actual_time=row.get(config.HEADER_ACTUAL_TIME, ""),
        est_start=est_start,
        est_end=est_end,
        actual_end=actual_end,
        status=derive_status(est_end, actual_end, now),
        original_row=row,
    )


def parse(raw_text: str, now: datetime | None = None) -> list[TaskRecord]:
    """Parse comma-separated task text into task records.

    The first non-blank line is the header row. Rows with fewer cells than
    headers, or without a category or item, are skipped; unreadable dates
    become ``None``. Nothing here raises for bad input.
    """

    now = now or datetime.now()
    lines = [line.strip() for line in raw_text.splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return []

    headers = [header.strip() for header in lines[0].split(",")]

    records: list[TaskRecord] = []
    for line_index, line in enumerate(lines[1:], start=1):
        cells = [cell.strip() for cell in line.split(",")]
        if len(cells) < len(headers):
            logger.debug("Line %d: %d cells for %d headers, skipped", line_index, len(cells), len(headers))
            continue

        row = dict(zip(headers, cells))
        record = _parse_row(row, line_index, now)
        if record is not None:
            records.append(record)
    return records


def parse_file(file_path: str | Path, now: datetime | None = None) -> list[TaskRecord]:
    """Parse a UTF-8 task file from disk."""

    text = Path(file_path).read_text(encoding="utf-8-sig")
    return parse(text, now=now)
