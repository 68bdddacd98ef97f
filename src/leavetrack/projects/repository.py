from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def list_for_member(self, user_id: int) -> Sequence[Project]:
        raise NotImplementedError

    def create_project(
        self,
        *,
        name: str,
        members: tuple[int, ...],
        notes: Optional[str],
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def save(self, project: Project) -> bool:
        raise NotImplementedError

    def delete(self, project_id: int) -> bool:
        raise NotImplementedError
