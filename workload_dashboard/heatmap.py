"""Calendar heatmap bucketing."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Iterable

from workload_dashboard import config
from workload_dashboard.schema import HeatmapDay, TaskRecord


def is_active_on(task: TaskRecord, day: date) -> bool:
    start, end = task.span()
    if start is not None and end is not None:
        return start <= day <= end
    # a single usable boundary only marks that exact day
    return day == (start or end)


def tasks_active_on(tasks: Iterable[TaskRecord], day: date) -> list[TaskRecord]:
    """Return the tasks whose planned (or actual) span covers ``day``."""

    return [task for task in tasks if is_active_on(task, day)]


def intensity_level(task_count: int) -> int:
    """Map a day's task count onto the 0..4 intensity scale."""

    for level, upper in enumerate(config.INTENSITY_BANDS):
        if task_count <= upper:
            return level
    return config.MAX_INTENSITY


def generate_month_heatmap(tasks: Iterable[TaskRecord], year: int, month: int) -> list[HeatmapDay]:
    """Build one heatmap entry per day of ``month`` (1-12), in date order."""

    tasks = list(tasks)
    _, days_in_month = calendar.monthrange(year, month)

    heatmap = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        day_tasks = tasks_active_on(tasks, day)
        heatmap.append(
            HeatmapDay(
                date=day,
                task_count=len(day_tasks),
                tasks=tuple(day_tasks),
                intensity_level=intensity_level(len(day_tasks)),
            )
        )
    return heatmap
