from __future__ import annotations

from typing import Optional

from .model import SystemSettings
from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, initial: Optional[SystemSettings] = None) -> None:
        self._settings = initial or SystemSettings()

    def get(self) -> SystemSettings:
        return self._settings

    def save(self, settings: SystemSettings) -> None:
        self._settings = settings
