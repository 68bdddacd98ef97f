from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import HalfDay, LeaveStatus, LeaveType
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def create_leave(
        self,
        *,
        user_id: int,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        half_day: Optional[HalfDay],
        reason: str,
        created_at: datetime,
        status: LeaveStatus = LeaveStatus.PENDING,
    ) -> int:
        raise NotImplementedError

    def save(self, leave: LeaveRequest) -> bool:
        """Replace a stored request; False when the id is unknown."""

        raise NotImplementedError
