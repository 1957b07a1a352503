from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .calendar_grid.service import CalendarService
from .database.connection import DBConfig, DatabaseConnection
from .stats.service import StatsService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService
from .workdays.mysql_workday_repository import MySQLWorkDayRepository
from .workdays.repository import WorkDayRepository
from .workdays.service import WorkDayService
from .workplaces.mysql_workplace_repository import MySQLWorkplaceRepository
from .workplaces.repository import WorkplaceRepository
from .workplaces.service import WorkplaceService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    workplaces_repo: WorkplaceRepository
    workdays_repo: WorkDayRepository

    auth_service: AuthService
    workplace_service: WorkplaceService
    workday_service: WorkDayService
    stats_service: StatsService
    calendar_service: CalendarService


def assemble(
    *,
    users_repo: UserRepository,
    workplaces_repo: WorkplaceRepository,
    workdays_repo: WorkDayRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementation."""
    workplace_service = WorkplaceService(workplaces_repo)
    return Container(
        conn=conn,
        users_repo=users_repo,
        workplaces_repo=workplaces_repo,
        workdays_repo=workdays_repo,
        auth_service=AuthService(users_repo),
        workplace_service=workplace_service,
        workday_service=WorkDayService(workdays_repo, workplace_service),
        stats_service=StatsService(workdays_repo),
        calendar_service=CalendarService(workdays_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return assemble(
        users_repo=MySQLUserRepository(conn),
        workplaces_repo=MySQLWorkplaceRepository(conn),
        workdays_repo=MySQLWorkDayRepository(conn),
        conn=conn,
    )
