from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import HalfDay, LeaveStatus, LeaveType
from .model import LeaveRequest
from .repository import LeaveRepository


class InMemoryLeaveRepository(LeaveRepository):
    def __init__(self) -> None:
        self._leaves: dict[int, LeaveRequest] = {}
        self._next_id = 1

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        return self._leaves.get(int(request_id))

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        return [lv for lv in self.list_all() if lv.user_id == int(user_id)]

    def list_all(self, *, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        items = [self._leaves[k] for k in sorted(self._leaves)]
        if status is not None:
            items = [lv for lv in items if lv.status == status]
        return items

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
        request_id = self._next_id
        self._next_id += 1
        self._leaves[request_id] = LeaveRequest(
            request_id=request_id,
            user_id=int(user_id),
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            half_day=half_day,
            reason=reason,
            status=status,
            created_at=created_at,
            updated_at=created_at,
        )
        return request_id

    def save(self, leave: LeaveRequest) -> bool:
        if leave.request_id not in self._leaves:
            return False
        self._leaves[leave.request_id] = leave
        return True
