"""Demo script for workload-dashboard."""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from workload_dashboard.comparison import compare_workloads
from workload_dashboard.heatmap import generate_month_heatmap
from workload_dashboard.loader import default_roster, load_team
from workload_dashboard.metrics import compute_metrics


def main() -> None:
    people = load_team(default_roster("examples/action-data"))
    year = date.today().year
    for person in people:
        busy_days = [day for day in generate_month_heatmap(person.tasks, year, 3) if day.task_count]
        print(person.name, compute_metrics(person.tasks))
        print("  busy days in March:", [(day.date.isoformat(), day.intensity_level) for day in busy_days])
    for entry in compare_workloads(people):
        print(f"{entry.name}: {entry.total} tasks, {entry.deviation_percent:+d}% ({entry.imbalance})")


if __name__ == "__main__":
    main()
