from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import month_bounds, now_local
from ..core.enums import OTStatus
from ..export.csv_export import CsvFile, CsvHeader, CsvMetadata, export_to_csv
from ..export.pdf_export import PdfFile, export_to_pdf
from ..overtime.formatting import format_currency, format_hours
from .aggregator import (
    aggregate_by_employee,
    calculate_overall_stats,
    calculate_request_stats,
    group_by_company,
)
from .model import CompanyReport, row_to_dict
from .repository import OTReportRepository

logger = logging.getLogger(__name__)

COMPANY_REPORT_HEADERS = (
    CsvHeader("employee_no", "Employee No."),
    CsvHeader("employee_name", "Name"),
    CsvHeader("company_name", "Company"),
    CsvHeader("department", "Department"),
    CsvHeader("position", "Position"),
    CsvHeader("total_ot_hours", "Total OT Hours"),
    CsvHeader("amount", "Amount (RM)"),
    CsvHeader("monthly_total", "Monthly Total (RM)"),
)


class OTReportService:
    """Use case: monthly OT report grouped by company (HR / management view).

    Only management-approved requests count towards hours and cost;
    supervisor-verified requests are loaded so they show up as pending review.
    """

    APPROVED = OTStatus.MANAGEMENT_APPROVED
    PENDING_REVIEW = OTStatus.SUPERVISOR_VERIFIED

    def __init__(self, reports: OTReportRepository):
        self._reports = reports

    def build_company_report(self, *, month: date) -> CompanyReport:
        start, end = month_bounds(month)
        requests = self._reports.list_requests(
            start_date=start,
            end_date=end,
            statuses=[self.APPROVED, self.PENDING_REVIEW],
        )
        approved = [r for r in requests if r.status == self.APPROVED.value]

        rows = aggregate_by_employee(approved, self._reports.list_profiles())
        groups = group_by_company(rows)
        overall = calculate_overall_stats(groups)

        logger.info(
            "Built company OT report: %d companies, %d employees",
            overall.total_companies,
            overall.total_employees,
            extra={"period": start.strftime("%Y-%m")},
        )
        return CompanyReport(
            start=start,
            end=end,
            groups=tuple(groups),
            overall=overall,
            stats=calculate_request_stats(requests, pending_status=self.PENDING_REVIEW),
        )

    def export_company_report_csv(self, *, month: date, generated_at: Optional[datetime] = None) -> CsvFile:
        report = self.build_company_report(month=month)
        generated_at = generated_at or now_local()

        data = []
        for group in report.groups:
            for row in group.employees:
                item = row_to_dict(row)
                item["total_ot_hours"] = format_hours(item.get("total_ot_hours"))
                item["amount"] = format_currency(item.get("amount"))
                item["monthly_total"] = format_currency(item.get("monthly_total"))
                data.append(item)

        return export_to_csv(
            data,
            f"HR_OT_Report_{report.start.strftime('%b_%Y')}",
            COMPANY_REPORT_HEADERS,
            CsvMetadata(
                report_name="HR Overtime Report",
                period=report.start.strftime("%B %Y"),
                generated_date=generated_at.strftime("%d/%m/%Y %H:%M"),
            ),
        )

    def export_company_report_pdf(self, *, month: date, generated_at: Optional[datetime] = None) -> PdfFile:
        report = self.build_company_report(month=month)
        generated_at = generated_at or now_local()
        period = report.start.strftime("%B %Y")

        return export_to_pdf(
            report,
            f"HR_OT_Report_{period.replace(' ', '_')}",
            period=period,
            generated_date=generated_at.strftime("%d/%m/%Y"),
        )
