from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence, Union

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.validators import optional_text
from ..core.enums import HalfDay, LeaveStatus, LeaveType, Role
from ..core.exceptions import (
    AuthorizationError,
    InvalidStateTransitionError,
    NotFoundError,
    ValidationError,
)
from ..users.repository import UserRepository
from .accounting import LeaveAccountingEngine
from .model import LeaveRequest, LeaveSummary
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    """Use cases: submit, review and report on leave requests."""

    def __init__(self, leaves: LeaveRepository, users: UserRepository, engine: LeaveAccountingEngine):
        self._leaves = leaves
        self._users = users
        self._engine = engine

    @staticmethod
    def _parse_leave_type(value) -> LeaveType:
        try:
            return LeaveType(value)
        except ValueError:
            raise ValidationError(f"Unknown leave type '{value}'")

    @staticmethod
    def _parse_half_day(value) -> Optional[HalfDay]:
        if value is None or value == "" or value == "none":
            return None
        try:
            return HalfDay(value)
        except ValueError:
            raise ValidationError(f"Unknown half-day marker '{value}'")

    @staticmethod
    def _parse_status(value) -> Optional[LeaveStatus]:
        if value is None or value == "":
            return None
        try:
            return LeaveStatus(value)
        except ValueError:
            raise ValidationError(f"Unknown leave status '{value}'")

    def submit_leave(
        self,
        *,
        user_id: int,
        leave_type: Union[LeaveType, str],
        start_date: Union[date, str],
        end_date: Union[date, str],
        reason: str = "",
        half_day: Union[HalfDay, str, None] = None,
    ) -> int:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User", user_id)

        kind = self._parse_leave_type(leave_type)
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date)
        marker = self._parse_half_day(half_day)

        if end < start:
            raise ValidationError("End date cannot be before start date")
        if marker is not None and start != end:
            raise InvalidStateTransitionError("A half-day marker is only allowed on a single-day request")

        request_id = self._leaves.create_leave(
            user_id=user.user_id,
            leave_type=kind,
            start_date=start,
            end_date=end,
            half_day=marker,
            reason=optional_text(reason, "Reason") or "",
            created_at=now_local(),
        )
        logger.info("leave request %s submitted by user %s (%s, %s..%s)", request_id, user.user_id, kind.value, start, end)
        return request_id

    def get_leave(self, *, current_role: Role, current_user_id: int, request_id: int) -> LeaveRequest:
        leave = self._leaves.get_by_id(int(request_id))
        if not leave:
            raise NotFoundError("Leave request", request_id)
        if current_role != Role.ADMIN and leave.user_id != int(current_user_id):
            raise AuthorizationError("You do not have permission to view this leave request")
        return leave

    def list_for_user(self, user_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_user(int(user_id))

    def list_all(self, *, current_role: Role, status=None) -> Sequence[LeaveRequest]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can list all leave requests")
        return self._leaves.list_all(status=self._parse_status(status))

    def approve_leave(
        self,
        *,
        current_role: Role,
        reviewer_id: int,
        request_id: int,
        note: str = "",
    ) -> LeaveRequest:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can approve leave requests")

        leave = self._leaves.get_by_id(int(request_id))
        if not leave:
            raise NotFoundError("Leave request", request_id)
        return self._engine.approve(leave, int(reviewer_id), optional_text(note, "Review note"))

    def reject_leave(
        self,
        *,
        current_role: Role,
        reviewer_id: int,
        request_id: int,
        note: str = "",
    ) -> LeaveRequest:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can reject leave requests")

        leave = self._leaves.get_by_id(int(request_id))
        if not leave:
            raise NotFoundError("Leave request", request_id)
        return self._engine.reject(leave, int(reviewer_id), optional_text(note, "Review note"))

    def summary_for(self, *, current_role: Role, current_user_id: int, user_id: int) -> LeaveSummary:
        if current_role != Role.ADMIN and int(user_id) != int(current_user_id):
            raise AuthorizationError("You do not have permission to view this summary")
        return self._engine.summarize(int(user_id))
