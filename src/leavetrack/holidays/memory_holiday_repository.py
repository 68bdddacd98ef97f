from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import Holiday
from .repository import HolidayRepository


class InMemoryHolidayRepository(HolidayRepository):
    def __init__(self) -> None:
        self._holidays: dict[int, Holiday] = {}
        self._next_id = 1

    def get_by_id(self, holiday_id: int) -> Optional[Holiday]:
        return self._holidays.get(int(holiday_id))

    def list_by_country(self, country: str) -> Sequence[Holiday]:
        return [h for h in self._holidays.values() if h.country == country]

    def create_holiday(self, *, name: str, holiday_date: date, country: str) -> int:
        holiday_id = self._next_id
        self._next_id += 1
        self._holidays[holiday_id] = Holiday(
            holiday_id=holiday_id,
            name=name,
            holiday_date=holiday_date,
            country=country,
        )
        return holiday_id

    def delete(self, holiday_id: int) -> bool:
        return self._holidays.pop(int(holiday_id), None) is not None
