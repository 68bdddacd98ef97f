from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(int(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        wanted = (email or "").strip().lower()
        for user in self._users.values():
            if user.email.lower() == wanted:
                return user
        return None

    def list_all(self) -> Sequence[User]:
        return [self._users[k] for k in sorted(self._users)]

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
        user_id = self._next_id
        self._next_id += 1
        self._users[user_id] = User(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            job_description=job_description,
            annual_leave_quota=int(annual_leave_quota),
            projects=tuple(projects),
            notes=notes,
            password_hash=password_hash,
        )
        return user_id

    def save(self, user: User) -> bool:
        if user.user_id not in self._users:
            return False
        self._users[user.user_id] = user
        return True
