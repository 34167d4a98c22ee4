from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .payroll.service import PayrollService
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.repository import ProfileRepository
from .profiles.service import AuthService, ProfileService
from .worklogs.mysql_worklog_repository import MySQLWorkLogRepository
from .worklogs.repository import WorkLogRepository
from .worklogs.service import WorkLogService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    profiles_repo: ProfileRepository
    work_logs_repo: WorkLogRepository

    auth_service: AuthService
    profile_service: ProfileService
    work_log_service: WorkLogService
    payroll_service: PayrollService


def build_services(
    *,
    profiles_repo: ProfileRepository,
    work_logs_repo: WorkLogRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        work_logs_repo=work_logs_repo,
        auth_service=AuthService(profiles_repo),
        profile_service=ProfileService(profiles_repo),
        work_log_service=WorkLogService(work_logs_repo, profiles_repo),
        payroll_service=PayrollService(work_logs_repo, profiles_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        profiles_repo=MySQLProfileRepository(conn),
        work_logs_repo=MySQLWorkLogRepository(conn),
        conn=conn,
    )
