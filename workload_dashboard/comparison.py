"""Cross-person workload comparison."""

from __future__ import annotations

from typing import Sequence

from workload_dashboard import config
from workload_dashboard.metrics import compute_metrics, round_half_up
from workload_dashboard.schema import ComparisonEntry, PersonWorkload


def classify_deviation(deviation: float) -> str:
    """Return the imbalance tag for a signed deviation from the team average."""

    if deviation > config.OVERLOADED_ABOVE:
        return config.IMBALANCE_OVERLOADED
    if deviation > config.HIGH_ABOVE:
        return config.IMBALANCE_HIGH
    if deviation < config.UNDERUTILIZED_BELOW:
        return config.IMBALANCE_UNDERUTILIZED
    return config.IMBALANCE_BALANCED


def compare_workloads(people: Sequence[PersonWorkload]) -> list[ComparisonEntry]:
    """Compare each person's task total with the team average, keeping input order."""

    if not people:
        return []

    metrics = [compute_metrics(person.tasks) for person in people]
    avg_total = sum(m.total for m in metrics) / len(metrics)

    entries = []
    for person, person_metrics in zip(people, metrics):
        if avg_total == 0:
            deviation = 0.0
        else:
            deviation = (person_metrics.total - avg_total) / avg_total * 100.0

        entries.append(
            ComparisonEntry(
                **person_metrics.as_dict(),
                name=person.name,
                imbalance=classify_deviation(deviation),
                deviation_percent=round_half_up(deviation),
            )
        )
    return entries
