from __future__ import annotations

from datetime import date, datetime

import pytest

from leavetrack.container import build_container
from leavetrack.core.enums import LeaveStatus, LeaveType, Role
from leavetrack.store.seed import seed_demo_data

SEED_TODAY = date(2026, 2, 2)


@pytest.fixture
def container():
    return build_container()


@pytest.fixture
def seeded(container):
    seed_demo_data(container, today=SEED_TODAY)
    return container


def add_user(users, *, quota=20, role=Role.MEMBER, email=None, projects=()):
    n = len(users.list_all()) + 1
    return users.create_user(
        first_name=f"User{n}",
        last_name="Test",
        email=email or f"user{n}@example.com",
        role=role,
        job_description="Developer",
        annual_leave_quota=quota,
        projects=projects,
    )


def add_leave(
    leaves,
    user_id,
    start,
    end,
    *,
    status=LeaveStatus.APPROVED,
    kind=LeaveType.ANNUAL,
    half_day=None,
):
    return leaves.create_leave(
        user_id=user_id,
        leave_type=kind,
        start_date=start,
        end_date=end,
        half_day=half_day,
        reason="",
        created_at=datetime(2025, 1, 1, 9, 0),
        status=status,
    )
