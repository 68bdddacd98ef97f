from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from leavetrack.core.enums import Role
from leavetrack.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)
from leavetrack.users.model import User
from leavetrack.users.service import AuthService


@dataclass
class InMemoryUsers:
    users_by_email: dict[str, User]

    def get_by_email(self, email: str) -> Optional[User]:
        return self.users_by_email.get(email)


def _user(**overrides) -> User:
    fields = dict(
        user_id=7,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        role=Role.MEMBER,
        job_description="Engineer",
        annual_leave_quota=20,
        password_hash=generate_password_hash("secret"),
    )
    fields.update(overrides)
    return User(**fields)


def test_authenticate_success():
    svc = AuthService(InMemoryUsers({"ada@example.com": _user()}))

    session_user = svc.authenticate("ada@example.com", "secret")

    assert session_user.user_id == 7
    assert session_user.full_name == "Ada Lovelace"
    assert session_user.role == Role.MEMBER


@pytest.mark.parametrize(
    "user",
    [
        None,
        _user(is_active=False),
        _user(password_hash="CHANGE_ME"),
        _user(password_hash=None),
    ],
)
def test_authenticate_failures(user):
    users = {"ada@example.com": user} if user else {}
    svc = AuthService(InMemoryUsers(users))

    with pytest.raises(AuthenticationError):
        svc.authenticate("ada@example.com", "secret")


def test_authenticate_wrong_password():
    svc = AuthService(InMemoryUsers({"ada@example.com": _user()}))

    with pytest.raises(AuthenticationError):
        svc.authenticate("ada@example.com", "nope")


def test_seeded_logins(seeded):
    admin = seeded.auth_service.authenticate("ADMIN@example.com", "password")
    demo = seeded.auth_service.demo_login()

    assert admin.role == Role.ADMIN
    assert demo.email == "member@example.com"
    assert demo.role == Role.MEMBER


def test_demo_login_without_roster(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.demo_login()


def _new_user(**overrides):
    fields = dict(
        current_role=Role.ADMIN,
        first_name="Grace",
        last_name="Hopper",
        email="grace@example.com",
        job_description="Compiler writer",
    )
    fields.update(overrides)
    return fields


def test_create_user_uses_default_quota_from_settings(seeded):
    seeded.settings_service.update(current_role=Role.ADMIN, default_annual_leave_quota=24)

    uid = seeded.user_service.create_user(**_new_user())

    assert seeded.user_service.get_user(uid).annual_leave_quota == 24


def test_create_user_joins_projects(seeded):
    uid = seeded.user_service.create_user(**_new_user(projects=[3, 3]))

    assert seeded.user_service.get_user(uid).projects == (3,)
    assert uid in seeded.projects_repo.get_by_id(3).members
    assert uid not in seeded.projects_repo.get_by_id(1).members


def test_create_user_requires_admin(seeded):
    with pytest.raises(AuthorizationError):
        seeded.user_service.create_user(**_new_user(current_role=Role.MEMBER))


@pytest.mark.parametrize(
    "overrides",
    [
        {"first_name": "  "},
        {"email": "not-an-email"},
        {"email": "member@example.com"},
        {"job_description": ""},
        {"annual_leave_quota": -1},
        {"annual_leave_quota": 20.9},
        {"annual_leave_quota": True},
        {"annual_leave_quota": "twenty"},
        {"first_name": 5},
        {"notes": 42},
        {"role": "owner"},
    ],
)
def test_create_user_validation(seeded, overrides):
    before = len(seeded.users_repo.list_all())

    with pytest.raises(ValidationError):
        seeded.user_service.create_user(**_new_user(**overrides))

    assert len(seeded.users_repo.list_all()) == before


def test_create_user_with_unknown_project(seeded):
    with pytest.raises(NotFoundError):
        seeded.user_service.create_user(**_new_user(projects=[42]))


def test_update_user_moves_between_projects(seeded):
    user = seeded.user_service.get_user(4)

    updated = seeded.user_service.update_user(
        current_role=Role.ADMIN,
        user_id=4,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        job_description=user.job_description,
        role=user.role,
        annual_leave_quota=18,
        projects=[2],
    )

    assert updated.annual_leave_quota == 18
    assert 4 not in seeded.projects_repo.get_by_id(1).members
    assert 4 in seeded.projects_repo.get_by_id(2).members


def test_update_user_rejects_negative_quota_without_side_effects(seeded):
    user = seeded.user_service.get_user(2)

    with pytest.raises(ValidationError):
        seeded.user_service.update_user(
            current_role=Role.ADMIN,
            user_id=2,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            job_description=user.job_description,
            role=user.role,
            annual_leave_quota=-5,
            projects=[],
        )

    assert seeded.user_service.get_user(2) == user
    assert 2 in seeded.projects_repo.get_by_id(1).members


def test_list_users_search(seeded):
    found = seeded.user_service.list_users(search="developer")

    assert {u.user_id for u in found} == {2, 4}
    assert len(seeded.user_service.list_users()) == 5


def test_invite(seeded):
    assert seeded.user_service.invite(current_role=Role.ADMIN, email=" new@example.com ") == "new@example.com"

    with pytest.raises(ValidationError):
        seeded.user_service.invite(current_role=Role.ADMIN, email="nope")
    with pytest.raises(AuthorizationError):
        seeded.user_service.invite(current_role=Role.MEMBER, email="new@example.com")


def test_whole_float_quota_is_accepted(seeded):
    uid = seeded.user_service.create_user(**_new_user(annual_leave_quota=18.0))

    assert seeded.user_service.get_user(uid).annual_leave_quota == 18
