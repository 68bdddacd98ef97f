from __future__ import annotations

from dataclasses import dataclass

from .calendar_view.service import CalendarService
from .holidays.memory_holiday_repository import InMemoryHolidayRepository
from .holidays.service import HolidayService
from .leaves.accounting import LeaveAccountingEngine
from .leaves.memory_leave_repository import InMemoryLeaveRepository
from .leaves.service import LeaveService
from .projects.memory_project_repository import InMemoryProjectRepository
from .projects.service import ProjectService
from .settings.memory_settings_repository import InMemorySettingsRepository
from .settings.model import SystemSettings
from .settings.service import SettingsService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    users_repo: InMemoryUserRepository
    leaves_repo: InMemoryLeaveRepository
    projects_repo: InMemoryProjectRepository
    holidays_repo: InMemoryHolidayRepository
    settings_repo: InMemorySettingsRepository

    engine: LeaveAccountingEngine

    auth_service: AuthService
    user_service: UserService
    leave_service: LeaveService
    project_service: ProjectService
    holiday_service: HolidayService
    settings_service: SettingsService
    calendar_service: CalendarService


def build_container(*, settings: dict | None = None) -> Container:
    settings = settings or {}
    defaults = SystemSettings()
    initial = SystemSettings(
        country=str(settings.get("DEFAULT_COUNTRY", defaults.country)),
        default_annual_leave_quota=int(settings.get("DEFAULT_ANNUAL_LEAVE_QUOTA", defaults.default_annual_leave_quota)),
    )

    users_repo = InMemoryUserRepository()
    leaves_repo = InMemoryLeaveRepository()
    projects_repo = InMemoryProjectRepository()
    holidays_repo = InMemoryHolidayRepository()
    settings_repo = InMemorySettingsRepository(initial)

    engine = LeaveAccountingEngine(users_repo, leaves_repo)

    auth_service = AuthService(users_repo)
    user_service = UserService(users_repo, projects_repo, settings_repo)
    leave_service = LeaveService(leaves_repo, users_repo, engine)
    project_service = ProjectService(projects_repo, users_repo)
    holiday_service = HolidayService(holidays_repo)
    settings_service = SettingsService(settings_repo)
    calendar_service = CalendarService(engine, projects_repo, holidays_repo, settings_repo)

    return Container(
        users_repo=users_repo,
        leaves_repo=leaves_repo,
        projects_repo=projects_repo,
        holidays_repo=holidays_repo,
        settings_repo=settings_repo,
        engine=engine,
        auth_service=auth_service,
        user_service=user_service,
        leave_service=leave_service,
        project_service=project_service,
        holiday_service=holiday_service,
        settings_service=settings_service,
        calendar_service=calendar_service,
    )
