from __future__ import annotations

from datetime import date, timedelta

import pytest

from leavetrack.core.enums import HalfDay, LeaveStatus, Role
from leavetrack.core.exceptions import NotFoundError, ValidationError

from conftest import SEED_TODAY

MEMBER_ID = 2


def _on(offset):
    return SEED_TODAY + timedelta(days=offset)


def test_teammate_half_day_shows_as_team_leave(seeded):
    ann = seeded.calendar_service.my_day(user_id=MEMBER_ID, day=_on(10))

    assert ann.own_leaves == ()
    assert [(lv.user_id, lv.half_day) for lv in ann.team_leaves] == [(4, HalfDay.AFTERNOON)]
    assert ann.is_holiday is False


def test_rejected_teammate_leave_is_hidden(seeded):
    ann = seeded.calendar_service.my_day(user_id=MEMBER_ID, day=_on(17).isoformat())

    assert ann.team_leaves == ()


def test_own_pending_leave_is_listed(seeded):
    ann = seeded.calendar_service.my_day(user_id=MEMBER_ID, day=_on(20))

    assert [lv.status for lv in ann.own_leaves] == [LeaveStatus.PENDING]


def test_leave_outside_my_projects_is_not_team_leave(seeded):
    # Emma (5) shares no project with the demo member.
    ann = seeded.calendar_service.my_day(user_id=MEMBER_ID, day=_on(3))

    assert ann.team_leaves == ()


def test_holidays_follow_the_configured_country(seeded):
    christmas = date(2025, 12, 25)

    assert seeded.calendar_service.my_day(user_id=MEMBER_ID, day=christmas).holiday_names == ("Christmas Day",)

    seeded.settings_service.update(current_role=Role.ADMIN, country="UK")
    ann = seeded.calendar_service.my_day(user_id=MEMBER_ID, day=christmas)
    assert ann.is_holiday is False
    assert ann.holiday_names == ()


def test_project_day_lists_members_leave(seeded):
    ann = seeded.calendar_service.project_day(project_id=1, day=_on(6))

    assert ann.own_leaves == ()
    assert [lv.user_id for lv in ann.team_leaves] == [2]

    with pytest.raises(NotFoundError):
        seeded.calendar_service.project_day(project_id=42, day=_on(6))


def test_month_markers(seeded):
    markers = seeded.calendar_service.month_markers(user_id=MEMBER_ID, year=2026, month=2)
    by_day = {m.day.day: m for m in markers}

    assert len(markers) == 28
    assert [d for d, m in by_day.items() if m.own_leave] == [7, 8, 9, 10, 11, 22]
    assert [d for d, m in by_day.items() if m.team_leave] == [12]
    assert not any(m.holiday for m in markers)


def test_month_markers_flag_holidays(seeded):
    markers = seeded.calendar_service.month_markers(user_id=MEMBER_ID, year=2025, month=7)

    assert [m.day for m in markers if m.holiday] == [date(2025, 7, 4)]


def test_month_markers_reject_bad_month(seeded):
    with pytest.raises(ValidationError):
        seeded.calendar_service.month_markers(user_id=MEMBER_ID, year=2026, month=13)
