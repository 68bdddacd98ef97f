from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import require_non_negative
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..holidays.service import require_country
from .model import SystemSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> SystemSettings:
        return self._settings.get()

    def update(
        self,
        *,
        current_role: Role,
        country: Optional[str] = None,
        default_annual_leave_quota=None,
    ) -> SystemSettings:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can change settings")

        current = self._settings.get()
        updated = replace(
            current,
            country=require_country(country) if country is not None else current.country,
            default_annual_leave_quota=(
                require_non_negative(default_annual_leave_quota, "Default annual leave quota")
                if default_annual_leave_quota is not None
                else current.default_annual_leave_quota
            ),
        )
        self._settings.save(updated)
        logger.info("settings updated: country=%s default_quota=%s", updated.country, updated.default_annual_leave_quota)
        return updated
