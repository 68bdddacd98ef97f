from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_ANNUAL_LEAVE_QUOTA, DEFAULT_COUNTRY


@dataclass(frozen=True)
class SystemSettings:
    """Process-wide settings; reset to these defaults on every restart."""

    country: str = DEFAULT_COUNTRY
    default_annual_leave_quota: int = DEFAULT_ANNUAL_LEAVE_QUOTA
