"""Layout data for the timeline and monthly calendar views."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Iterable, Sequence, TypeVar

from workload_dashboard import config
from workload_dashboard.schema import PersonWorkload, TaskRecord

T = TypeVar("T")


@dataclass(frozen=True)
class EventBar:
    """A task clipped to the visible calendar grid."""

    id: str
    person: str
    task: str
    category: str
    start: date
    end: date
    status: str


def scheduled_tasks(tasks: Iterable[TaskRecord]) -> list[TaskRecord]:
    """Tasks with both a start and an end after the actual-end fallback."""

    return [task for task in tasks if all(task.span())]


def timeline_range(
    people: Iterable[PersonWorkload],
    today: date | None = None,
    pad_before: int = config.TIMELINE_PAD_BEFORE_DAYS,
    pad_after: int = config.TIMELINE_PAD_AFTER_DAYS,
) -> tuple[date, date, int]:
    """Return (start, end, total_days) covering every task date, padded on both sides."""

    all_dates = [
        value
        for person in people
        for task in person.tasks
        for value in (task.est_start, task.est_end, task.actual_end)
        if value is not None
    ]

    if not all_dates:
        today = today or date.today()
        return today, today + timedelta(days=config.TIMELINE_EMPTY_SPAN_DAYS), config.TIMELINE_EMPTY_SPAN_DAYS

    start = min(all_dates) - timedelta(days=pad_before)
    end = max(all_dates) + timedelta(days=pad_after)
    return start, end, (end - start).days + 1


def _task_span(task: TaskRecord) -> tuple[date, date]:
    return task.span()


def stack_rows(items: Sequence[T], span: Callable[[T], tuple[date, date]] = _task_span) -> list[list[T]]:
    """Pack items into rows so that no two items in a row overlap (first fit)."""

    rows: list[list[T]] = []
    for item in items:
        start, end = span(item)
        for row in rows:
            if all(end < span(other)[0] or start > span(other)[1] for other in row):
                row.append(item)
                break
        else:
            rows.append([item])
    return rows


def calendar_grid(year: int, month: int) -> tuple[date, date]:
    """First and last day of the Sunday-start weeks covering ``month``."""

    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    # weekday(): Monday=0 .. Sunday=6
    grid_start = first - timedelta(days=(first.weekday() + 1) % 7)
    grid_end = last + timedelta(days=(5 - last.weekday()) % 7)
    return grid_start, grid_end


def calendar_weeks(year: int, month: int) -> list[list[date]]:
    grid_start, grid_end = calendar_grid(year, month)
    days = [grid_start + timedelta(days=offset) for offset in range((grid_end - grid_start).days + 1)]
    return [days[i : i + 7] for i in range(0, len(days), 7)]


def month_event_bars(people: Iterable[PersonWorkload], year: int, month: int) -> list[EventBar]:
    """Clip every scheduled task overlapping the month's calendar grid."""

    grid_start, grid_end = calendar_grid(year, month)

    bars = []
    for person in people:
        for task in scheduled_tasks(person.tasks):
            start, end = task.span()
            if end < grid_start or start > grid_end:
                continue
            bars.append(
                EventBar(
                    id=task.id,
                    person=person.name,
                    task=task.item,
                    category=task.category,
                    start=max(start, grid_start),
                    end=min(end, grid_end),
                    status=task.status,
                )
            )
    return bars


def week_bar_rows(bars: Sequence[EventBar], week: Sequence[date]) -> list[list[EventBar]]:
    """Rows of non-overlapping bars touching the given week."""

    week_bars = [bar for bar in bars if bar.start <= week[-1] and bar.end >= week[0]]
    return stack_rows(week_bars, span=lambda bar: (bar.start, bar.end))
