"""Per-person workload metrics."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable

from workload_dashboard import config
from workload_dashboard.schema import TaskRecord, WorkloadMetrics


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""

    return int(math.floor(value + 0.5))


def compute_metrics(tasks: Iterable[TaskRecord]) -> WorkloadMetrics:
    """Count tasks per status and category for one person."""

    tasks = list(tasks)
    statuses = Counter(task.status for task in tasks)
    total = len(tasks)
    completed = statuses[config.STATUS_COMPLETED]
    delayed = statuses[config.STATUS_DELAYED]

    category_breakdown: dict[str, int] = {}
    for task in tasks:
        category_breakdown[task.category] = category_breakdown.get(task.category, 0) + 1

    dated = sum(1 for task in tasks if task.is_dated)

    return WorkloadMetrics(
        total=total,
        completed=completed,
        delayed=delayed,
        in_progress=total - completed - delayed,
        undated=total - dated,
        completion_rate=round_half_up(completed / total * 100) if total else 0,
        category_breakdown=category_breakdown,
        dated_task_count=dated,
    )


def top_categories(metrics: WorkloadMetrics, limit: int = config.TOP_CATEGORY_LIMIT) -> list[tuple[str, int]]:
    """Return the busiest categories, largest first."""

    # sorted() is stable, so ties keep first-seen order
    ranked = sorted(metrics.category_breakdown.items(), key=lambda item: item[1], reverse=True)
    return ranked[:limit]


def undated_tasks(tasks: Iterable[TaskRecord]) -> list[TaskRecord]:
    return [task for task in tasks if not task.is_dated]
