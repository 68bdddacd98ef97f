from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence

from werkzeug.security import check_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_email, require_non_empty, require_non_negative
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..settings.repository import SettingsRepository
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

DEMO_LOGIN_EMAIL = "member@example.com"


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: int
    full_name: str
    email: str
    role: Role


class AuthService:
    """Use case: mock authentication against the in-memory roster."""

    def __init__(self, users: UserRepository):
        self._users = users

    @staticmethod
    def _to_session(user: User) -> SessionUser:
        return SessionUser(user_id=user.user_id, full_name=user.full_name, email=user.email, role=user.role)

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email(email or "")
        if not user or not user.is_active or not user.password_hash:
            logger.warning("failed login for %r", email)
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes in hand-edited seed data
            ok = False

        if not ok:
            logger.warning("failed login for %r", email)
            raise AuthenticationError("Invalid email or password")
        return self._to_session(user)

    def demo_login(self) -> SessionUser:
        """One-click login as the demo member account."""
        user = self._users.get_by_email(DEMO_LOGIN_EMAIL)
        if not user or not user.is_active:
            raise AuthenticationError("Demo account is not available")
        return self._to_session(user)


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository, projects: ProjectRepository, settings: SettingsRepository):
        self._users = users
        self._projects = projects
        self._settings = settings

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def list_users(self, *, search: Optional[str] = None) -> Sequence[User]:
        users = self._users.list_all()
        term = (search or "").strip().lower()
        if not term:
            return users
        return [
            u
            for u in users
            if term in u.first_name.lower()
            or term in u.last_name.lower()
            or term in u.email.lower()
            or term in u.job_description.lower()
        ]

    def _check_projects(self, project_ids: Iterable[int]) -> tuple[int, ...]:
        ids = tuple(dict.fromkeys(int(p) for p in project_ids))
        for pid in ids:
            if not self._projects.get_by_id(pid):
                raise NotFoundError("Project", pid)
        return ids

    def _sync_memberships(self, user_id: int, project_ids: tuple[int, ...]) -> None:
        now = now_local()
        for project in self._projects.list_all():
            wanted = project.project_id in project_ids
            present = user_id in project.members
            if wanted and not present:
                members = project.members + (user_id,)
            elif present and not wanted:
                members = tuple(m for m in project.members if m != user_id)
            else:
                continue
            self._projects.save(replace(project, members=members, updated_at=now))

    def _check_email_free(self, email: str, *, except_user_id: Optional[int] = None) -> None:
        existing = self._users.get_by_email(email)
        if existing and existing.user_id != except_user_id:
            raise ValidationError("Email is already in use")

    def create_user(
        self,
        *,
        current_role: Role,
        first_name: str,
        last_name: str,
        email: str,
        job_description: str,
        role=Role.MEMBER,
        annual_leave_quota=None,
        projects: Iterable[int] = (),
        notes: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can create users")

        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")
        email = require_email(email)
        job_description = require_non_empty(job_description, "Job description")
        role = self._parse_role(role)
        if annual_leave_quota is None:
            annual_leave_quota = self._settings.get().default_annual_leave_quota
        quota = require_non_negative(annual_leave_quota, "Annual leave quota")
        project_ids = self._check_projects(projects)
        self._check_email_free(email)

        user_id = self._users.create_user(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            job_description=job_description,
            annual_leave_quota=quota,
            projects=project_ids,
            notes=optional_text(notes, "Notes"),
            password_hash=password_hash,
        )
        self._sync_memberships(user_id, project_ids)
        logger.info("user %s created (%s)", user_id, email)
        return user_id

    def update_user(
        self,
        *,
        current_role: Role,
        user_id: int,
        first_name: str,
        last_name: str,
        email: str,
        job_description: str,
        role,
        annual_leave_quota,
        projects: Iterable[int] = (),
        notes: Optional[str] = None,
    ) -> User:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can edit users")

        user = self.get_user(user_id)
        email = require_email(email)
        project_ids = self._check_projects(projects)
        self._check_email_free(email, except_user_id=user.user_id)

        updated = replace(
            user,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            email=email,
            job_description=require_non_empty(job_description, "Job description"),
            role=self._parse_role(role),
            annual_leave_quota=require_non_negative(annual_leave_quota, "Annual leave quota"),
            projects=project_ids,
            notes=optional_text(notes, "Notes"),
        )
        self._users.save(updated)
        self._sync_memberships(updated.user_id, project_ids)
        logger.info("user %s updated", updated.user_id)
        return updated

    def invite(self, *, current_role: Role, email: str, role=Role.MEMBER) -> str:
        """Validate an invitation; nothing is sent, the invite is only logged."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can invite users")
        email = require_email(email)
        role = self._parse_role(role)
        logger.info("invitation issued to %s as %s", email, role.value)
        return email

    @staticmethod
    def _parse_role(value) -> Role:
        try:
            return Role(value)
        except ValueError:
            raise ValidationError(f"Unknown role '{value}'")
