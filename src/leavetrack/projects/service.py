from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.model import User
from ..users.repository import UserRepository
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService:
    """Use case: project/team assignment."""

    def __init__(self, projects: ProjectRepository, users: UserRepository):
        self._projects = projects
        self._users = users

    def get_project(self, project_id: int) -> Project:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project", project_id)
        return project

    def projects_of(self, user_id: int) -> Sequence[Project]:
        return self._projects.list_for_member(int(user_id))

    def members_of(self, project_id: int) -> Sequence[User]:
        project = self.get_project(project_id)
        members = []
        for uid in project.members:
            user = self._users.get_by_id(uid)
            if user:
                members.append(user)
        return members

    def list_accessible(
        self,
        *,
        current_role: Role,
        user_id: int,
        search: Optional[str] = None,
    ) -> Sequence[Project]:
        if current_role == Role.ADMIN:
            projects = self._projects.list_all()
        else:
            projects = self.projects_of(user_id)

        term = (search or "").strip().lower()
        if term:
            projects = [p for p in projects if term in p.name.lower() or term in (p.notes or "").lower()]
        return projects

    def get_accessible(self, *, current_role: Role, user_id: int, project_id: int) -> Project:
        project = self.get_project(project_id)
        if current_role != Role.ADMIN and int(user_id) not in project.members:
            raise AuthorizationError("You are not a member of this project")
        return project

    def _check_members(self, members: Iterable[int]) -> tuple[int, ...]:
        ids = tuple(dict.fromkeys(int(m) for m in members))
        for uid in ids:
            if not self._users.get_by_id(uid):
                raise NotFoundError("User", uid)
        return ids

    def _sync_user_projects(self, project_id: int, before: tuple[int, ...], after: tuple[int, ...]) -> None:
        for uid in set(before) | set(after):
            user = self._users.get_by_id(uid)
            if not user:
                continue
            if uid in after and project_id not in user.projects:
                self._users.save(replace(user, projects=user.projects + (project_id,)))
            elif uid not in after and project_id in user.projects:
                self._users.save(replace(user, projects=tuple(p for p in user.projects if p != project_id)))

    def create_project(
        self,
        *,
        current_role: Role,
        name: str,
        members: Iterable[int] = (),
        notes: Optional[str] = None,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can create projects")

        name = require_non_empty(name, "Project name")
        member_ids = self._check_members(members)
        project_id = self._projects.create_project(
            name=name,
            members=member_ids,
            notes=optional_text(notes, "Notes"),
            created_at=now_local(),
        )
        self._sync_user_projects(project_id, (), member_ids)
        logger.info("project %s created with %d member(s)", project_id, len(member_ids))
        return project_id

    def update_project(
        self,
        *,
        current_role: Role,
        project_id: int,
        name: str,
        members: Iterable[int] = (),
        notes: Optional[str] = None,
    ) -> Project:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can edit projects")

        project = self.get_project(project_id)
        name = require_non_empty(name, "Project name")
        member_ids = self._check_members(members)

        updated = replace(
            project,
            name=name,
            members=member_ids,
            notes=optional_text(notes, "Notes"),
            updated_at=now_local(),
        )
        self._projects.save(updated)
        self._sync_user_projects(updated.project_id, project.members, member_ids)
        logger.info("project %s updated", updated.project_id)
        return updated

    def delete_project(self, *, current_role: Role, project_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete projects")

        project = self.get_project(project_id)
        self._projects.delete(project.project_id)
        self._sync_user_projects(project.project_id, project.members, ())
        logger.info("project %s deleted", project.project_id)
