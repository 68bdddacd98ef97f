from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Project:
    project_id: int
    name: str
    members: tuple[int, ...]
    created_at: datetime
    updated_at: datetime
    notes: Optional[str] = None
