from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from .model import Project
from .repository import ProjectRepository


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self) -> None:
        self._projects: dict[int, Project] = {}
        self._next_id = 1

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self._projects.get(int(project_id))

    def list_all(self) -> Sequence[Project]:
        return [self._projects[k] for k in sorted(self._projects)]

    def list_for_member(self, user_id: int) -> Sequence[Project]:
        return [p for p in self.list_all() if int(user_id) in p.members]

    def create_project(
        self,
        *,
        name: str,
        members: tuple[int, ...],
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        project_id = self._next_id
        self._next_id += 1
        self._projects[project_id] = Project(
            project_id=project_id,
            name=name,
            members=tuple(members),
            notes=notes,
            created_at=created_at,
            updated_at=created_at,
        )
        return project_id

    def save(self, project: Project) -> bool:
        if project.project_id not in self._projects:
            return False
        self._projects[project.project_id] = project
        return True

    def delete(self, project_id: int) -> bool:
        return self._projects.pop(int(project_id), None) is not None
