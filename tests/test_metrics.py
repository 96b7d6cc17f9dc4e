from datetime import date

import pytest

from workload_dashboard.metrics import compute_metrics, round_half_up, top_categories, undated_tasks
from workload_dashboard.schema import TaskRecord


def make_task(index, category="Design", status="pending", est_start=None, est_end=None, actual_end=None):
    return TaskRecord(
        id=f"{category}-task-{index}",
        category=category,
        item=f"task {index}",
        estimated_time="1d",
        actual_time="--",
        est_start=est_start,
        est_end=est_end,
        actual_end=actual_end,
        status=status,
    )


def sample_tasks():
    return [
        make_task(1, "Design", "completed", actual_end=date(2025, 3, 4)),
        make_task(2, "Design", "delayed", est_end=date(2025, 3, 1)),
        make_task(3, "Backend", "pending", est_start=date(2025, 3, 20)),
        make_task(4, "Backend", "pending"),
        make_task(5, "Ops", "completed", est_start=date(2025, 3, 1), actual_end=date(2025, 3, 2)),
        make_task(6, "Backend", "pending"),
    ]


def test_compute_metrics_partition():
    metrics = compute_metrics(sample_tasks())
    assert metrics.total == 6
    assert metrics.completed == 2
    assert metrics.delayed == 1
    assert metrics.in_progress == 3
    assert metrics.completed + metrics.delayed + metrics.in_progress == metrics.total
    assert metrics.undated == 2
    assert metrics.dated_task_count == 4
    assert metrics.completion_rate == 33
    assert metrics.category_breakdown == {"Design": 2, "Backend": 3, "Ops": 1}
    assert sum(metrics.category_breakdown.values()) == metrics.total


def test_compute_metrics_empty():
    metrics = compute_metrics([])
    assert metrics.total == 0
    assert metrics.completion_rate == 0
    assert metrics.category_breakdown == {}


def test_completion_rate_rounds_half_up():
    tasks = [make_task(1, status="completed")] + [make_task(i) for i in range(2, 9)]
    assert compute_metrics(tasks).completion_rate == 13


def test_round_half_up():
    assert round_half_up(12.5) == 13
    assert round_half_up(-42.5) == -42
    assert round_half_up(-85.71) == -86
    assert round_half_up(42.86) == 43


def test_top_categories():
    metrics = compute_metrics(sample_tasks())
    assert top_categories(metrics) == [("Backend", 3), ("Design", 2), ("Ops", 1)]
    assert top_categories(metrics, limit=1) == [("Backend", 3)]


def test_undated_tasks():
    assert [task.id for task in undated_tasks(sample_tasks())] == ["Backend-task-4", "Backend-task-6"]


def test_metrics_are_hashable_and_read_only():
    metrics = compute_metrics(sample_tasks())
    assert hash(metrics) == hash(compute_metrics(sample_tasks()))
    with pytest.raises(TypeError):
        metrics.category_breakdown["Design"] = 99
    assert metrics.as_dict()["category_breakdown"] == {"Design": 2, "Backend": 3, "Ops": 1}
