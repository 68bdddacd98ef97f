"""JSON shapes returned by the controllers."""

from __future__ import annotations

from typing import Callable, Optional

from ..holidays.model import Holiday
from ..leaves.model import DayAnnotations, LeaveRequest, LeaveSummary
from ..projects.model import Project
from ..settings.model import SystemSettings
from ..users.model import User


def user_to_dict(user: User) -> dict:
    return {
        "id": user.user_id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "full_name": user.full_name,
        "email": user.email,
        "role": user.role.value,
        "job_description": user.job_description,
        "annual_leave_quota": user.annual_leave_quota,
        "projects": list(user.projects),
        "notes": user.notes,
    }


def leave_to_dict(leave: LeaveRequest) -> dict:
    return {
        "id": leave.request_id,
        "user_id": leave.user_id,
        "type": leave.leave_type.value,
        "start_date": leave.start_date.isoformat(),
        "end_date": leave.end_date.isoformat(),
        "half_day": leave.half_day.value if leave.half_day else None,
        "reason": leave.reason,
        "status": leave.status.value,
        "created_at": leave.created_at.isoformat(),
        "updated_at": leave.updated_at.isoformat(),
        "reviewed_by": leave.reviewed_by,
        "review_note": leave.review_note,
    }


def summary_to_dict(summary: LeaveSummary) -> dict:
    return {
        "approved": summary.approved,
        "rejected": summary.rejected,
        "pending": summary.pending,
        "total": summary.total,
        "used_days": summary.used_days,
        "remaining_days": summary.remaining_days,
    }


def project_to_dict(project: Project) -> dict:
    return {
        "id": project.project_id,
        "name": project.name,
        "members": list(project.members),
        "notes": project.notes,
        "created_at": project.created_at.isoformat(),
        "updated_at": project.updated_at.isoformat(),
    }


def holiday_to_dict(holiday: Holiday) -> dict:
    return {
        "id": holiday.holiday_id,
        "name": holiday.name,
        "date": holiday.holiday_date.isoformat(),
        "country": holiday.country,
    }


def settings_to_dict(settings: SystemSettings) -> dict:
    return {
        "country": settings.country,
        "default_annual_leave_quota": settings.default_annual_leave_quota,
    }


def annotations_to_dict(ann: DayAnnotations, user_lookup: Callable[[int], Optional[User]]) -> dict:
    team = []
    for leave in ann.team_leaves:
        owner = user_lookup(leave.user_id)
        item = leave_to_dict(leave)
        item["user_name"] = owner.full_name if owner else None
        team.append(item)

    return {
        "date": ann.day.isoformat(),
        "is_holiday": ann.is_holiday,
        "holiday_names": list(ann.holiday_names),
        "own_leaves": [leave_to_dict(lv) for lv in ann.own_leaves],
        "team_leaves": team,
    }
