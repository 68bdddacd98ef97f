from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Union

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..holidays.repository import HolidayRepository
from ..leaves.accounting import LeaveAccountingEngine
from ..leaves.model import DayAnnotations
from ..projects.repository import ProjectRepository
from ..settings.repository import SettingsRepository


@dataclass(frozen=True)
class DayMarker:
    """Per-day flags used to highlight a month grid."""

    day: date
    own_leave: bool
    team_leave: bool
    holiday: bool


class CalendarService:
    """Resolves teams and holidays for a viewer, then asks the engine to annotate days."""

    def __init__(
        self,
        engine: LeaveAccountingEngine,
        projects: ProjectRepository,
        holidays: HolidayRepository,
        settings: SettingsRepository,
    ):
        self._engine = engine
        self._projects = projects
        self._holidays = holidays
        self._settings = settings

    def _team_of(self, user_id: int) -> list[int]:
        ids: dict[int, None] = {}
        for project in self._projects.list_for_member(int(user_id)):
            for uid in project.members:
                if uid != int(user_id):
                    ids[uid] = None
        return list(ids)

    def _country_holidays(self):
        return self._holidays.list_by_country(self._settings.get().country)

    def my_day(self, *, user_id: int, day: Union[date, str]) -> DayAnnotations:
        return self._engine.day_annotations(
            parse_iso_date(day),
            int(user_id),
            self._team_of(user_id),
            self._country_holidays(),
        )

    def project_day(self, *, project_id: int, day: Union[date, str]) -> DayAnnotations:
        project = self._projects.get_by_id(int(project_id))
        if not project:
            raise NotFoundError("Project", project_id)
        return self._engine.day_annotations(
            parse_iso_date(day),
            None,
            project.members,
            self._country_holidays(),
        )

    def month_markers(self, *, user_id: int, year: int, month: int) -> list[DayMarker]:
        try:
            _, days_in_month = monthrange(int(year), int(month))
        except (ValueError, TypeError):
            raise ValidationError(f"Invalid month {year}-{month}")

        team = self._team_of(user_id)
        holidays = self._country_holidays()
        first = date(int(year), int(month), 1)

        markers = []
        for offset in range(days_in_month):
            ann = self._engine.day_annotations(first + timedelta(days=offset), int(user_id), team, holidays)
            markers.append(
                DayMarker(
                    day=ann.day,
                    own_leave=bool(ann.own_leaves),
                    team_leave=bool(ann.team_leaves),
                    holiday=ann.is_holiday,
                )
            )
        return markers
