"""Leave accounting: quota arithmetic, summaries and per-day calendar annotations.

Everything here is a derivation over the injected repositories except
``approve``/``reject``, which are the only operations that write.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Callable, Iterable, Optional, Union

from ..common.datetime_utils import as_calendar_day, now_local
from ..core.constants import HALF_DAY_DEDUCTION
from ..core.enums import LeaveStatus, LeaveType
from ..core.exceptions import InvalidStateTransitionError, NotFoundError
from ..holidays.model import Holiday
from ..users.repository import UserRepository
from .model import DayAnnotations, LeaveRequest, LeaveSummary
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveAccountingEngine:
    def __init__(
        self,
        users: UserRepository,
        leaves: LeaveRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._users = users
        self._leaves = leaves
        self._clock = clock or now_local

    @staticmethod
    def leave_days(leave: LeaveRequest) -> float:
        """Inclusive day span, half a day less when a half-day marker is set."""
        days = float((leave.end_date - leave.start_date).days + 1)
        if leave.half_day is not None:
            days -= HALF_DAY_DEDUCTION
        return days

    def summarize(self, user_id: int) -> LeaveSummary:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User", user_id)

        approved = rejected = pending = 0
        used = 0.0
        for leave in self._leaves.list_for_user(user.user_id):
            if leave.status == LeaveStatus.APPROVED:
                approved += 1
                if leave.leave_type == LeaveType.ANNUAL:
                    used += self.leave_days(leave)
            elif leave.status == LeaveStatus.REJECTED:
                rejected += 1
            else:
                pending += 1

        return LeaveSummary(
            approved=approved,
            rejected=rejected,
            pending=pending,
            total=approved + rejected + pending,
            used_days=used,
            remaining_days=user.annual_leave_quota - used,
        )

    @staticmethod
    def overlaps_date(request: LeaveRequest, day: Union[date, datetime]) -> bool:
        d = as_calendar_day(day)
        return as_calendar_day(request.start_date) <= d <= as_calendar_day(request.end_date)

    def day_annotations(
        self,
        day: Union[date, datetime],
        viewer_user_id: Optional[int],
        relevant_user_ids: Iterable[int],
        holidays: Iterable[Holiday],
    ) -> DayAnnotations:
        """Annotate ``day`` for ``viewer_user_id``.

        ``holidays`` must already be filtered to the active country. Only
        approved requests of other users are reported as team leave. With no
        viewer (project calendars) ``own_leaves`` is always empty.
        """
        d = as_calendar_day(day)
        viewer_id = int(viewer_user_id) if viewer_user_id is not None else None

        holiday_names = tuple(h.name for h in holidays if as_calendar_day(h.holiday_date) == d)

        own: tuple[LeaveRequest, ...] = ()
        if viewer_id is not None:
            own = tuple(lv for lv in self._leaves.list_for_user(viewer_id) if self.overlaps_date(lv, d))

        team: list[LeaveRequest] = []
        for uid in dict.fromkeys(int(u) for u in relevant_user_ids):
            if uid == viewer_id:
                continue
            for leave in self._leaves.list_for_user(uid):
                if leave.status == LeaveStatus.APPROVED and self.overlaps_date(leave, d):
                    team.append(leave)

        return DayAnnotations(
            day=d,
            is_holiday=bool(holiday_names),
            holiday_names=holiday_names,
            own_leaves=own,
            team_leaves=tuple(team),
        )

    def approve(self, request: LeaveRequest, reviewer_id: int, note: Optional[str] = None) -> LeaveRequest:
        return self._review(request, LeaveStatus.APPROVED, reviewer_id, note)

    def reject(self, request: LeaveRequest, reviewer_id: int, note: Optional[str] = None) -> LeaveRequest:
        return self._review(request, LeaveStatus.REJECTED, reviewer_id, note)

    def _review(
        self,
        request: LeaveRequest,
        status: LeaveStatus,
        reviewer_id: int,
        note: Optional[str],
    ) -> LeaveRequest:
        stored = self._leaves.get_by_id(request.request_id)
        if not stored:
            raise NotFoundError("Leave request", request.request_id)
        if stored.status != LeaveStatus.PENDING:
            raise InvalidStateTransitionError(
                f"Leave request {stored.request_id} is already {stored.status.value}"
            )

        updated = replace(
            stored,
            status=status,
            reviewed_by=int(reviewer_id),
            review_note=note,
            updated_at=self._clock(),
        )
        self._leaves.save(updated)
        logger.info("leave request %s %s by user %s", updated.request_id, status.value, reviewer_id)
        return updated
