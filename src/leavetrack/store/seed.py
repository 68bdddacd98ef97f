"""Demo roster loaded into the in-memory repositories on startup.

Leave and project dates are relative to ``today`` so the dashboard always has
something upcoming to show; holidays are the fixed 2025 US calendar.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import TYPE_CHECKING, Optional

from werkzeug.security import generate_password_hash

from ..core.enums import HalfDay, LeaveStatus, LeaveType, Role

if TYPE_CHECKING:
    from ..container import Container

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

_USERS = [
    ("Admin", "User", "admin@example.com", Role.ADMIN, "HR Manager", 25, (1, 2), "Main admin account"),
    ("Member", "User", "member@example.com", Role.MEMBER, "Software Developer", 20, (1, 3), "Frontend developer"),
    ("Sarah", "Johnson", "sarah@example.com", Role.MEMBER, "Product Manager", 22, (2, 3), "Product team lead"),
    ("Michael", "Chen", "michael@example.com", Role.MEMBER, "Backend Developer", 20, (1,), "Works on API development"),
    ("Emma", "Davis", "emma@example.com", Role.MEMBER, "UX Designer", 21, (2,), "Design team member"),
]

# (name, members, notes, created days ago, updated days ago)
_PROJECTS = [
    ("Website Redesign", (1, 2, 4), "Complete overhaul of company website", 30, 5),
    ("Mobile App Development", (1, 3, 5), "New customer-facing mobile application", 60, 2),
    ("Data Analytics Platform", (2, 3), "Internal data visualization and reporting tool", 45, 10),
]

# (user, type, start offset, end offset, half day, reason, status, created offset, updated offset, note)
_LEAVES = [
    (2, LeaveType.ANNUAL, 5, 9, None, "Family vacation", LeaveStatus.APPROVED, -2, -1, None),
    (2, LeaveType.ANNUAL, 20, 20, HalfDay.MORNING, "Doctor appointment", LeaveStatus.PENDING, -1, -1, None),
    (3, LeaveType.ANNUAL, 15, 19, None, "Personal time off", LeaveStatus.REJECTED, -5, -3,
     "Critical project deadline during this period"),
    (4, LeaveType.ANNUAL, 10, 10, HalfDay.AFTERNOON, "Family event", LeaveStatus.APPROVED, -4, -3, None),
    (5, LeaveType.NORMAL, 3, 4, None, "Personal development workshop", LeaveStatus.APPROVED, -6, -5, None),
]

_HOLIDAYS = [
    ("New Year's Day", date(2025, 1, 1)),
    ("Martin Luther King Jr. Day", date(2025, 1, 20)),
    ("Presidents Day", date(2025, 2, 17)),
    ("Memorial Day", date(2025, 5, 26)),
    ("Independence Day", date(2025, 7, 4)),
    ("Labor Day", date(2025, 9, 1)),
    ("Veterans Day", date(2025, 11, 11)),
    ("Thanksgiving Day", date(2025, 11, 27)),
    ("Christmas Day", date(2025, 12, 25)),
]

ADMIN_USER_ID = 1


def seed_demo_data(container: "Container", *, today: Optional[date] = None) -> None:
    today = today or date.today()
    midnight = datetime.combine(today, time())

    password_hash = generate_password_hash(DEMO_PASSWORD)
    for first, last, email, role, job, quota, projects, notes in _USERS:
        container.users_repo.create_user(
            first_name=first,
            last_name=last,
            email=email,
            role=role,
            job_description=job,
            annual_leave_quota=quota,
            projects=projects,
            notes=notes,
            password_hash=password_hash,
        )

    for name, members, notes, created_ago, updated_ago in _PROJECTS:
        project_id = container.projects_repo.create_project(
            name=name,
            members=members,
            notes=notes,
            created_at=midnight - timedelta(days=created_ago),
        )
        project = container.projects_repo.get_by_id(project_id)
        container.projects_repo.save(replace(project, updated_at=midnight - timedelta(days=updated_ago)))

    for user_id, kind, start, end, half, reason, status, created, updated, note in _LEAVES:
        request_id = container.leaves_repo.create_leave(
            user_id=user_id,
            leave_type=kind,
            start_date=today + timedelta(days=start),
            end_date=today + timedelta(days=end),
            half_day=half,
            reason=reason,
            status=status,
            created_at=midnight + timedelta(days=created),
        )
        if status != LeaveStatus.PENDING:
            leave = container.leaves_repo.get_by_id(request_id)
            container.leaves_repo.save(
                replace(
                    leave,
                    reviewed_by=ADMIN_USER_ID,
                    review_note=note,
                    updated_at=midnight + timedelta(days=updated),
                )
            )

    for name, day in _HOLIDAYS:
        container.holidays_repo.create_holiday(name=name, holiday_date=day, country="US")

    logger.info(
        "demo data loaded: %d users, %d projects, %d leaves, %d holidays",
        len(_USERS),
        len(_PROJECTS),
        len(_LEAVES),
        len(_HOLIDAYS),
    )
