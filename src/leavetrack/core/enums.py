from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for permission checks."""

    ADMIN = "admin"
    MEMBER = "member"


class LeaveType(str, Enum):
    """Annual leave draws down the quota, normal leave does not."""

    ANNUAL = "annual"
    NORMAL = "normal"


class LeaveStatus(str, Enum):
    """Approval workflow state of a leave request."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class HalfDay(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
