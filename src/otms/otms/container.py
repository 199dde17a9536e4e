from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.service import OTReportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    reports_repo: MySQLReportRepository

    report_service: OTReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    reports_repo = MySQLReportRepository(conn)
    report_service = OTReportService(reports_repo)

    return Container(
        conn=conn,
        reports_repo=reports_repo,
        report_service=report_service,
    )
