from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object, no storage access here.
    """

    user_id: int
    first_name: str
    last_name: str
    email: str
    role: Role
    job_description: str
    annual_leave_quota: int
    projects: tuple[int, ...] = ()
    notes: Optional[str] = None
    password_hash: Optional[str] = None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
