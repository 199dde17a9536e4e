"""PDF rendering of the monthly company OT report.

Drawn directly on a reportlab canvas: a coloured title bar, two summary
boxes, then one table per company with a subtotal line. Every page carries
the generation date and a page number in the footer.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Any

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..core.constants import PDF_MIMETYPE
from ..overtime.formatting import format_currency
from ..reports.model import CompanyReport, row_to_dict

logger = logging.getLogger(__name__)

TITLE = "OVERTIME SUMMARY REPORT"
FOOTER_NOTE = "This is a computer-generated report. No signature is required."

HEADER_RGB = (0.12, 0.25, 0.47)
TABLE_HEADER_RGB = (0.9, 0.92, 0.95)
TEXT_RGB = (0.1, 0.1, 0.1)
MUTED_RGB = (0.45, 0.45, 0.45)

MARGIN = 1.5 * cm
ROW_HEIGHT = 0.55 * cm
FOOTER_SPACE = 2 * cm

# (row key, label, width, right aligned)
TABLE_COLUMNS = (
    ("employee_no", "Employee No", 2.4 * cm, False),
    ("employee_name", "Name", 4.6 * cm, False),
    ("department", "Department", 3.2 * cm, False),
    ("position", "Position", 3.2 * cm, False),
    ("total_ot_hours", "OT Hours", 1.8 * cm, True),
    ("amount", "Amount (RM)", 2.8 * cm, True),
)


@dataclass(frozen=True)
class PdfFile:
    filename: str
    content: bytes
    mimetype: str = PDF_MIMETYPE

    def to_bytes(self) -> bytes:
        return self.content


def _money(value: Any) -> str:
    """``1234.5`` -> ``1,234.50`` (no currency prefix)."""
    return format_currency(value).split(" ", 1)[1]


def _fit(text: str, width: float, font: str, size: float) -> str:
    if stringWidth(text, font, size) <= width:
        return text
    while text and stringWidth(text + "...", font, size) > width:
        text = text[:-1]
    return text + "..."


class _ReportCanvas:
    """Canvas wrapper that tracks the cursor and breaks pages."""

    def __init__(self, buf: BytesIO, *, generated_date: str):
        self.c = canvas.Canvas(buf, pagesize=A4, pageCompression=0)
        self.page_w, self.page_h = A4
        self.generated_date = generated_date
        self.page_num = 1
        self.y = self.page_h - MARGIN

    def ensure_space(self, needed: float) -> bool:
        if self.y - needed >= FOOTER_SPACE:
            return False
        self.draw_footer()
        self.c.showPage()
        self.page_num += 1
        self.y = self.page_h - MARGIN
        return True

    def draw_header(self, period: str) -> None:
        c = self.c
        bar = 2.5 * cm
        c.setFillColorRGB(*HEADER_RGB)
        c.rect(0, self.page_h - bar, self.page_w, bar, fill=1, stroke=0)
        c.setFillColorRGB(1, 1, 1)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(MARGIN, self.page_h - 1.2 * cm, TITLE)
        c.setFont("Helvetica", 10)
        c.drawString(MARGIN, self.page_h - 1.9 * cm, f"Period: {period}")
        self.y = self.page_h - bar - 0.8 * cm

    def draw_summary(self, report: CompanyReport) -> None:
        c = self.c
        overall = report.overall
        box_w = (self.page_w - 2 * MARGIN - 0.5 * cm) / 2
        box_h = 1.8 * cm
        boxes = (
            ("Total OT Hours", f"{overall.total_hours:.2f}"),
            ("Total OT Cost", format_currency(overall.total_cost)),
        )
        for i, (label, value) in enumerate(boxes):
            x = MARGIN + i * (box_w + 0.5 * cm)
            c.setFillColorRGB(*TABLE_HEADER_RGB)
            c.rect(x, self.y - box_h, box_w, box_h, fill=1, stroke=0)
            c.setFillColorRGB(*MUTED_RGB)
            c.setFont("Helvetica", 9)
            c.drawString(x + 0.4 * cm, self.y - 0.6 * cm, label)
            c.setFillColorRGB(*TEXT_RGB)
            c.setFont("Helvetica-Bold", 14)
            c.drawString(x + 0.4 * cm, self.y - 1.4 * cm, value)
        self.y -= box_h + 0.7 * cm

        c.setFont("Helvetica", 10)
        c.drawString(
            MARGIN,
            self.y,
            f"Total Employees: {overall.total_employees} | Companies: {overall.total_companies}",
        )
        self.y -= 1.0 * cm

        c.setFont("Helvetica-Bold", 12)
        c.drawString(MARGIN, self.y, "Employee Overtime Details by Company")
        self.y -= 0.8 * cm

    def _draw_table_header(self) -> None:
        c = self.c
        table_w = sum(col[2] for col in TABLE_COLUMNS)
        c.setFillColorRGB(*TABLE_HEADER_RGB)
        c.rect(MARGIN, self.y - 0.15 * cm, table_w, ROW_HEIGHT, fill=1, stroke=0)
        c.setFillColorRGB(*TEXT_RGB)
        self._draw_cells({key: label for key, label, _, _ in TABLE_COLUMNS}, font="Helvetica-Bold")

    def _draw_cells(self, values: dict, *, font: str = "Helvetica") -> None:
        c = self.c
        size = 8
        c.setFont(font, size)
        x = MARGIN
        for key, _, width, right in TABLE_COLUMNS:
            text = _fit(str(values.get(key) or ""), width - 0.2 * cm, font, size)
            if right:
                c.drawRightString(x + width - 0.1 * cm, self.y, text)
            else:
                c.drawString(x + 0.1 * cm, self.y, text)
            x += width
        self.y -= ROW_HEIGHT

    def draw_company(self, group) -> None:
        c = self.c
        self.ensure_space(3 * ROW_HEIGHT + 1.2 * cm)

        c.setFillColorRGB(*HEADER_RGB)
        c.setFont("Helvetica-Bold", 11)
        c.drawString(MARGIN, self.y, f"{group.company_name} ({group.company_code})")
        self.y -= 0.6 * cm
        c.setFillColorRGB(*TEXT_RGB)
        self._draw_table_header()

        for row in group.employees:
            if self.ensure_space(ROW_HEIGHT):
                self._draw_table_header()
            item = row_to_dict(row)
            item["total_ot_hours"] = f"{float(item.get('total_ot_hours') or 0):.2f}"
            item["amount"] = _money(item.get("amount"))
            self._draw_cells(item)

        stats = group.stats
        self.ensure_space(ROW_HEIGHT)
        c.setFont("Helvetica-Bold", 9)
        c.drawString(
            MARGIN,
            self.y - 0.1 * cm,
            f"{group.company_name} Subtotal: {stats.total_hours:.2f} hours | RM {_money(stats.total_cost)}",
        )
        self.y -= ROW_HEIGHT + 0.6 * cm

    def draw_footer(self) -> None:
        c = self.c
        c.setStrokeColorRGB(*MUTED_RGB)
        c.line(MARGIN, 1.4 * cm, self.page_w - MARGIN, 1.4 * cm)
        c.setFillColorRGB(*MUTED_RGB)
        c.setFont("Helvetica", 7)
        c.drawString(MARGIN, 1.0 * cm, f"Generated: {self.generated_date}")
        c.drawCentredString(self.page_w / 2, 0.6 * cm, FOOTER_NOTE)
        c.drawRightString(self.page_w - MARGIN, 1.0 * cm, f"Page {self.page_num}")
        c.setFillColorRGB(*TEXT_RGB)

    def finish(self) -> None:
        self.draw_footer()
        self.c.showPage()
        self.c.save()


def render_company_report_pdf(report: CompanyReport, *, period: str, generated_date: str) -> bytes:
    buf = BytesIO()
    pdf = _ReportCanvas(buf, generated_date=generated_date)
    pdf.c.setTitle(f"HR Overtime Report - {period}")

    pdf.draw_header(period)
    pdf.draw_summary(report)
    if not report.groups:
        pdf.c.setFont("Helvetica", 10)
        pdf.c.drawString(MARGIN, pdf.y, "No approved overtime for this period.")
    for group in report.groups:
        pdf.draw_company(group)
    pdf.finish()

    logger.debug("Rendered company OT report PDF (%d pages)", pdf.page_num)
    return buf.getvalue()


def export_to_pdf(report: CompanyReport, filename: str, *, period: str, generated_date: str) -> PdfFile:
    """Build a downloadable PDF file named ``{filename}.pdf``."""
    content = render_company_report_pdf(report, period=period, generated_date=generated_date)
    return PdfFile(filename=f"{filename}.pdf", content=content)
