from __future__ import annotations

import logging
from datetime import date
from typing import Sequence, Union

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import COUNTRIES
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


def require_country(code: str) -> str:
    code = code.strip().upper() if isinstance(code, str) else ""
    if code not in COUNTRIES:
        raise ValidationError(f"Unknown country '{code}'")
    return code


class HolidayService:
    """Use case: maintain the per-country holiday calendar."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_for_country(self, country: str) -> Sequence[Holiday]:
        return sorted(self._holidays.list_by_country(country), key=lambda h: h.holiday_date)

    def add_holiday(
        self,
        *,
        current_role: Role,
        name: str,
        holiday_date: Union[date, str],
        country: str,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can add holidays")

        name = require_non_empty(name, "Holiday name")
        day = parse_iso_date(holiday_date)
        country = require_country(country)

        holiday_id = self._holidays.create_holiday(name=name, holiday_date=day, country=country)
        logger.info("holiday %s added: %s on %s (%s)", holiday_id, name, day, country)
        return holiday_id

    def delete_holiday(self, *, current_role: Role, holiday_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Only admins can delete holidays")

        if not self._holidays.delete(int(holiday_id)):
            raise NotFoundError("Holiday", holiday_id)
        logger.info("holiday %s deleted", holiday_id)
