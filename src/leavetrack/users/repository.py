from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

    def create_user(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        role: Role,
        job_description: str,
        annual_leave_quota: int,
        projects: tuple[int, ...] = (),
        notes: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def save(self, user: User) -> bool:
        """Replace a stored user; False when the id is unknown."""

        raise NotImplementedError
