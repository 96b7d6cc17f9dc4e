from datetime import date, datetime, timezone

import pytest

from workload_dashboard.adapters.csv_adapter import derive_status, parse, parse_date, parse_file

HEADER = "類別,項目,預估時間,實際時間,預計開始,預計完成,實際完成"
NOW = datetime(2025, 3, 10, 9, 30)


def test_parse_completed_row():
    tasks = parse(f"{HEADER}\nDesign,Draft spec,2d,1d,3月1日,3月5日,3月4日\n", now=NOW)
    assert len(tasks) == 1
    task = tasks[0]
    assert task.category == "Design"
    assert task.item == "Draft spec"
    assert task.estimated_time == "2d"
    assert task.actual_time == "1d"
    assert task.est_start == date(2025, 3, 1)
    assert task.est_end == date(2025, 3, 5)
    assert task.actual_end == date(2025, 3, 4)
    assert task.status == "completed"
    assert task.id == "Design-Draft spec-1"
    assert task.original_row["項目"] == "Draft spec"


def test_parse_status_rules():
    text = "\n".join(
        [
            HEADER,
            "Ops,Past due,1d,--,3月1日,3月5日,--",
            "Ops,Future,1d,--,3月11日,3月20日,--",
            "Ops,Done late,1d,2d,3月1日,3月2日,3月9日",
            "Ops,Due today,1d,--,--,3月10日,--",
            "Ops,No dates,1d,--,--,--,--",
        ]
    )
    statuses = [task.status for task in parse(text, now=NOW)]
    assert statuses == ["delayed", "pending", "completed", "delayed", "pending"]


def test_parse_skips_malformed_rows():
    text = "\n".join(
        [
            HEADER,
            "Design,Too short,2d",
            ",No category,1d,--,--,--,--",
            "Design,,1d,--,--,--,--",
            "Backend,Import job,3d,--,3月10日,3月14日,--",
        ]
    )
    tasks = parse(text, now=NOW)
    assert [task.item for task in tasks] == ["Import job"]
    assert tasks[0].id == "Backend-Import job-4"


def test_parse_empty_and_blank_lines():
    assert parse("", now=NOW) == []
    assert parse("\n  \n", now=NOW) == []
    assert parse(HEADER, now=NOW) == []

    text = f"\n{HEADER}\n\n  Design , Draft spec ,2d,1d,--,--,--  \n\n"
    tasks = parse(text, now=NOW)
    assert len(tasks) == 1
    assert tasks[0].category == "Design"
    assert tasks[0].item == "Draft spec"


def test_duplicate_rows_get_distinct_ids():
    row = "Design,Draft spec,2d,1d,--,--,--"
    tasks = parse(f"{HEADER}\n{row}\n{row}\n", now=NOW)
    assert len({task.id for task in tasks}) == 2


def test_parse_date_variants():
    assert parse_date("3月15日", 2025) == date(2025, 3, 15)
    assert parse_date("12月1日", 2025) == date(2025, 12, 1)
    assert parse_date("--", 2025) is None
    assert parse_date("", 2025) is None
    assert parse_date(None, 2025) is None
    assert parse_date("2025-03-15", 2025) is None
    assert parse_date("2月30日", 2025) is None
    assert parse_date("13月1日", 2025) is None


def test_unparseable_date_is_absent_not_error():
    tasks = parse(f"{HEADER}\nOps,Odd date,1d,--,soon,3月40日,--\n", now=NOW)
    assert tasks[0].est_start is None
    assert tasks[0].est_end is None
    assert tasks[0].status == "pending"


def test_parse_file(tmp_path):
    path = tmp_path / "brian.md"
    path.write_text(f"{HEADER}\nDesign,Draft spec,2d,1d,3月1日,3月5日,--\n", encoding="utf-8")
    tasks = parse_file(path, now=NOW)
    assert len(tasks) == 1
    assert tasks[0].status == "delayed"


def test_original_row_is_read_only_copy():
    tasks = parse(f"{HEADER}\nDesign,Draft spec,2d,1d,--,--,--\n", now=NOW)
    with pytest.raises(TypeError):
        tasks[0].original_row["類別"] = "Changed"
    assert tasks[0].original_row["類別"] == "Design"
    assert isinstance(hash(tasks[0]), int)


def test_status_with_timezone_aware_now():
    aware_now = datetime(2025, 3, 10, 9, 30, tzinfo=timezone.utc)
    text = "\n".join(
        [
            HEADER,
            "Ops,Past due,1d,--,--,3月5日,--",
            "Ops,Due today,1d,--,--,3月10日,--",
            "Ops,Future,1d,--,--,3月20日,--",
        ]
    )
    assert [task.status for task in parse(text, now=aware_now)] == ["delayed", "delayed", "pending"]


def test_due_today_is_pending_at_midnight():
    assert derive_status(date(2025, 3, 10), None, datetime(2025, 3, 10)) == "pending"
    assert derive_status(date(2025, 3, 10), None, datetime(2025, 3, 10, 0, 1)) == "delayed"
    assert derive_status(date(2025, 3, 1), date(2025, 3, 2), datetime(2025, 3, 10)) == "completed"
