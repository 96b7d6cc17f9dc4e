"""JSON-ready dashboard payloads."""

from __future__ import annotations

from typing import Sequence

from workload_dashboard.comparison import compare_workloads
from workload_dashboard.heatmap import generate_month_heatmap
from workload_dashboard.metrics import compute_metrics, top_categories, undated_tasks
from workload_dashboard.schema import PersonWorkload, TaskRecord


def _task_payload(task: TaskRecord) -> dict:
    return {
        "id": task.id,
        "category": task.category,
        "item": task.item,
        "estimated_time": task.estimated_time,
        "actual_time": task.actual_time,
        "est_start": task.est_start.isoformat() if task.est_start else None,
        "est_end": task.est_end.isoformat() if task.est_end else None,
        "actual_end": task.actual_end.isoformat() if task.actual_end else None,
        "status": task.status,
    }


def build_report(
    people: Sequence[PersonWorkload],
    year: int,
    month: int,
    team: Sequence[PersonWorkload] | None = None,
) -> dict:
    """Collect metrics and heatmaps of ``people`` for one month.

    The comparison covers the whole ``team``, which defaults to ``people``.
    """

    report: dict = {"year": year, "month": month, "people": {}}
    for person in people:
        metrics = compute_metrics(person.tasks)
        heatmap = generate_month_heatmap(person.tasks, year, month)
        report["people"][person.name] = {
            "metrics": metrics.as_dict(),
            "top_categories": [{"category": c, "count": n} for c, n in top_categories(metrics)],
            "undated_tasks": [_task_payload(task) for task in undated_tasks(person.tasks)],
            "heatmap": [
                {
                    "date": day.date.isoformat(),
                    "task_count": day.task_count,
                    "intensity_level": day.intensity_level,
                    "task_ids": [task.id for task in day.tasks],
                }
                for day in heatmap
            ],
        }

    report["comparison"] = [entry.as_dict() for entry in compare_workloads(people if team is None else team)]
    return report
