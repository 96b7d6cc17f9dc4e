"""Core data schema for workload records."""

from dataclasses import dataclass, field, fields
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class TaskRecord:
    """One parsed row of a person's task list."""

    id: str
    category: str
    item: str
    estimated_time: str
    actual_time: str
    est_start: Optional[date]
    est_end: Optional[date]
    actual_end: Optional[date]
    status: str
    original_row: Mapping[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "original_row", MappingProxyType(dict(self.original_row)))

    def span(self) -> Tuple[Optional[date], Optional[date]]:
        """Return (start, end), each planned boundary falling back to actual_end."""

        return self.est_start or self.actual_end, self.est_end or self.actual_end

    @property
    def is_dated(self) -> bool:
        return any(value is not None for value in (self.est_start, self.est_end, self.actual_end))


@dataclass(frozen=True)
class PersonWorkload:
    name: str
    tasks: Tuple[TaskRecord, ...] = ()


@dataclass(frozen=True)
class WorkloadMetrics:
    """Per-person aggregate counts."""

    total: int
    completed: int
    delayed: int
    in_progress: int
    undated: int
    completion_rate: int
    category_breakdown: Mapping[str, int] = field(hash=False)
    dated_task_count: int

    def __post_init__(self):
        object.__setattr__(self, "category_breakdown", MappingProxyType(dict(self.category_breakdown)))

    def as_dict(self) -> dict:
        """Plain-dict copy of every field, JSON-ready."""

        payload = {f.name: getattr(self, f.name) for f in fields(self)}
        payload["category_breakdown"] = dict(self.category_breakdown)
        return payload


@dataclass(frozen=True)
class HeatmapDay:
    date: date
    task_count: int
    tasks: Tuple[TaskRecord, ...]
    intensity_level: int


@dataclass(frozen=True)
class ComparisonEntry(WorkloadMetrics):
    """Workload metrics of one person relative to the team average."""

    name: str
    imbalance: str
    deviation_percent: int
