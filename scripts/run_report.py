"""Build a workload report for one month from the roster's task files."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from workload_dashboard import config
from workload_dashboard.loader import default_roster, filter_people, load_team
from workload_dashboard.report import build_report


def main() -> None:
    today = date.today()
    parser = argparse.ArgumentParser(description="Build a personnel workload report")
    parser.add_argument("--source", default=config.DATA_SOURCE, help="Directory or URL holding the roster files")
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--month", type=int, default=today.month, help="Month number, 1-12")
    parser.add_argument("--people", nargs="*", help="Only include these people")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--output", default="outputs/workload_report.json")
    args = parser.parse_args()

    if not 1 <= args.month <= 12:
        parser.error("--month must be between 1 and 12")

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    team = load_team(default_roster(args.source))
    people = filter_people(team, args.people) if args.people else team

    report = build_report(people, args.year, args.month, team=team)
    print(json.dumps(report, indent=2, ensure_ascii=False))

    out_path = Path(args.output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Saved workload report to {out_path}")


if __name__ == "__main__":
    main()
