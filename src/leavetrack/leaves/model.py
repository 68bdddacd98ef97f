from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import HalfDay, LeaveStatus, LeaveType


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    user_id: int
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    created_at: datetime
    updated_at: datetime
    half_day: Optional[HalfDay] = None
    reviewed_by: Optional[int] = None
    review_note: Optional[str] = None

    @property
    def is_single_day(self) -> bool:
        return self.start_date == self.end_date


@dataclass(frozen=True)
class LeaveSummary:
    approved: int
    rejected: int
    pending: int
    total: int
    used_days: float
    remaining_days: float


@dataclass(frozen=True)
class DayAnnotations:
    """What a single calendar day looks like for one viewer."""

    day: date
    is_holiday: bool
    holiday_names: tuple[str, ...]
    own_leaves: tuple[LeaveRequest, ...]
    team_leaves: tuple[LeaveRequest, ...]
