"""Parallel loading of every roster member's task file."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Sequence

import requests

from workload_dashboard import config
from workload_dashboard.adapters import csv_adapter
from workload_dashboard.schema import PersonWorkload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Member:
    id: str
    name: str
    source: str


def default_roster(base: str = config.DATA_SOURCE) -> list[Member]:
    """Build the configured roster with sources resolved against ``base``."""

    base = base.rstrip("/")
    return [Member(id=member_id, name=name, source=f"{base}/{file_name}") for member_id, name, file_name in config.ROSTER]


def fetch_text(source: str) -> str:
    """Fetch a source over HTTP(S), or read it from disk."""

    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=config.FETCH_TIMEOUT_SECONDS)
        response.raise_for_status()
        return response.content.decode("utf-8-sig", errors="replace")
    return Path(source).read_text(encoding="utf-8-sig")


def load_person(
    member: Member,
    fetch: Callable[[str], str] = fetch_text,
    now: datetime | None = None,
) -> PersonWorkload:
    """Load one person; any failure leaves them with no tasks."""

    try:
        text = fetch(member.source)
        tasks = csv_adapter.parse(text, now=now)
    except Exception:  # noqa: BLE001
        logger.exception("Failed to load %s from %s", member.name, member.source)
        return PersonWorkload(name=member.name, tasks=())

    logger.info("Loaded %d tasks for %s", len(tasks), member.name)
    return PersonWorkload(name=member.name, tasks=tuple(tasks))


def load_team(
    roster: Sequence[Member],
    fetch: Callable[[str], str] = fetch_text,
    max_workers: int | None = None,
    now: datetime | None = None,
) -> list[PersonWorkload]:
    """Load every member in parallel and return their workloads in roster order."""

    if not roster:
        return []

    now = now or datetime.now()
    with ThreadPoolExecutor(max_workers=max_workers or len(roster)) as pool:
        futures = [pool.submit(load_person, member, fetch, now) for member in roster]
        people = [future.result() for future in futures]

    logger.info(
        "Loaded %d people, %d tasks in total",
        len(people),
        sum(len(person.tasks) for person in people),
    )
    return people


def filter_people(people: Iterable[PersonWorkload], selected: Iterable[str]) -> list[PersonWorkload]:
    """Keep only the selected people by name, preserving order."""

    selected = set(selected)
    return [person for person in people if person.name in selected]
