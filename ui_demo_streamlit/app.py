"""Streamlit demo UI for workload-dashboard."""

from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from workload_dashboard import config
from workload_dashboard.comparison import compare_workloads
from workload_dashboard.heatmap import generate_month_heatmap
from workload_dashboard.loader import default_roster, filter_people, load_team
from workload_dashboard.metrics import compute_metrics, top_categories, undated_tasks
from workload_dashboard.schema import PersonWorkload
from workload_dashboard.timeline import month_event_bars, timeline_range


INTENSITY_SYMBOLS = ["·", "░", "▒", "▓", "█"]


def _heatmap_row(person: PersonWorkload, year: int, month: int) -> dict[str, str]:
    row = {"person": person.name}
    for day in generate_month_heatmap(person.tasks, year, month):
        row[str(day.date.day)] = INTENSITY_SYMBOLS[day.intensity_level]
    return row


def shift_month(year: int, month: int, step: int) -> tuple[int, int]:
    """Move (year, month) by ``step`` months."""

    index = year * 12 + (month - 1) + step
    return index // 12, index % 12 + 1


def build_dashboard(
    people: Sequence[PersonWorkload],
    year: int,
    month: int,
    team: Sequence[PersonWorkload] | None = None,
) -> dict[str, Any]:
    """Compute everything the page shows for the selected people and month.

    The team comparison is taken over ``team`` (all loaded people), not the selection.
    """

    start, end, total_days = timeline_range(people)
    metrics = {person.name: compute_metrics(person.tasks) for person in people}
    return {
        "metrics": metrics,
        "top_categories": {name: top_categories(person_metrics) for name, person_metrics in metrics.items()},
        "heatmap_rows": [_heatmap_row(person, year, month) for person in people],
        "event_bars": month_event_bars(people, year, month),
        "comparison": compare_workloads(people if team is None else team),
        "undated": {person.name: undated_tasks(person.tasks) for person in people},
        "timeline": {"start": start, "end": end, "total_days": total_days},
    }


def main() -> None:
    import streamlit as st

    @st.cache_resource(show_spinner=False, ttl=15 * 60)
    def _load_team_cached(source: str) -> list[PersonWorkload]:
        return load_team(default_roster(source))

    st.set_page_config(page_title="Personnel Workload Dashboard", layout="wide")
    st.title("Personnel Workload Dashboard")

    today = date.today()
    if "year_month" not in st.session_state:
        st.session_state.year_month = (today.year, today.month)

    with st.sidebar:
        st.header("Controls")
        source = st.text_input("Data source", value=config.DATA_SOURCE)
        names = [name for _, name, _ in config.ROSTER]
        selected = st.multiselect("People", options=names, default=names)
        prev_col, next_col = st.columns(2)
        if prev_col.button("◀ Prev"):
            st.session_state.year_month = shift_month(*st.session_state.year_month, -1)
        if next_col.button("Next ▶"):
            st.session_state.year_month = shift_month(*st.session_state.year_month, 1)

    year, month = st.session_state.year_month
    team = _load_team_cached(source)
    people = filter_people(team, selected)
    if not people:
        st.info("Select at least one person in the sidebar.")
        return

    result = build_dashboard(people, year, month, team=team)

    st.subheader(f"{year}-{month:02d}")
    st.table(result["heatmap_rows"])
    st.dataframe(
        [
            {"person": bar.person, "task": bar.task, "start": bar.start, "end": bar.end, "status": bar.status}
            for bar in result["event_bars"]
        ]
    )

    st.subheader("Team comparison")
    st.table(
        [
            {
                "person": entry.name,
                "total": entry.total,
                "completed": entry.completed,
                "delayed": entry.delayed,
                "deviation %": entry.deviation_percent,
                "imbalance": entry.imbalance,
            }
            for entry in result["comparison"]
        ]
    )

    columns = st.columns(len(people))
    for column, person in zip(columns, people):
        metrics = result["metrics"][person.name]
        column.metric(person.name, metrics.total, f"{metrics.completion_rate}% done")
        column.write(result["top_categories"][person.name])

    undated = [task for tasks in result["undated"].values() for task in tasks]
    if undated:
        st.subheader("Pending / Undated Tasks")
        st.table([{"category": t.category, "item": t.item, "est": t.estimated_time} for t in undated])


if __name__ == "__main__":
    main()
