"""Data models for the calendar and ordered master lists."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Protocol

DropPosition = Literal["before", "after"]


class DayType(str, Enum):
    """Classification of a timeline column."""

    WORKING_DAY = "working_day"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"


class MasterResource(str, Enum):
    """User-ordered master lists."""

    CHANNELS = "channels"
    TASK_TYPES = "task_types"
    TASK_STATUSES = "task_statuses"
    ASSIGNEES = "assignees"


class Identified(Protocol):
    """Anything carrying a stable string id."""

    @property
    def id(self) -> str: ...


@dataclass(frozen=True)
class SortOrderRecord:
    """Persisted position of one row in an ordered list."""

    id: str
    sort_order: int


@dataclass(frozen=True)
class TimelineDay:
    """One column of the Gantt header."""

    date: str
    day_type: DayType
    holiday_name: str | None = None

    @property
    def is_non_working(self) -> bool:
        """Whether the column should be shaded."""
        return self.day_type != DayType.WORKING_DAY


@dataclass
class MasterItem:
    """An entry of a master list (channel, task type, status or assignee)."""

    id: str
    resource: MasterResource
    name: str
    sort_order: int
    is_active: bool = True
    is_done: bool = False

    def to_sort_order_record(self) -> SortOrderRecord:
        """Project onto the shape the ordering functions reconcile against."""
        return SortOrderRecord(id=self.id, sort_order=self.sort_order)
