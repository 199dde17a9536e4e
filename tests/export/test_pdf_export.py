from datetime import date

from src.otms.otms.export.pdf_export import FOOTER_NOTE, TITLE, export_to_pdf, render_company_report_pdf
from src.otms.otms.reports.aggregator import calculate_overall_stats, group_by_company
from src.otms.otms.reports.model import CompanyReport, RequestStats


def _report(rows):
    groups = group_by_company(rows)
    return CompanyReport(
        start=date(2026, 3, 1),
        end=date(2026, 3, 31),
        groups=tuple(groups),
        overall=calculate_overall_stats(groups),
        stats=RequestStats(pending_review=0, total_hours=0.0, total_cost=0.0, with_violations=0),
    )


def _row(i, company_id="c1", company_name="Alpha Foods"):
    return {
        "employee_id": f"e{i}",
        "employee_no": f"E{i:03d}",
        "employee_name": f"Worker {i}",
        "department": "Packing",
        "position": "Operator",
        "company_id": company_id,
        "company_name": company_name,
        "company_code": "AF",
        "total_ot_hours": 2.5,
        "amount": 1234.5,
    }


def test_render_draws_title_summary_and_footer():
    content = render_company_report_pdf(_report([_row(1)]), period="March 2026", generated_date="01/04/2026")

    assert content.startswith(b"%PDF")
    assert TITLE.encode() in content
    assert FOOTER_NOTE.encode() in content
    assert b"Total OT Hours" in content
    assert b"RM 1,234.50" in content
    assert b"Generated: 01/04/2026" in content
    assert b"Page 1" in content


def test_table_cells_use_two_decimals():
    content = render_company_report_pdf(_report([_row(1)]), period="March 2026", generated_date="01/04/2026")

    assert b"E001" in content
    assert b"Worker 1" in content
    assert b"2.50" in content
    assert b"1,234.50" in content


def test_long_reports_break_pages_and_repeat_footer():
    rows = [_row(i) for i in range(80)]

    content = render_company_report_pdf(_report(rows), period="March 2026", generated_date="01/04/2026")

    assert b"Page 2" in content
    assert content.count(FOOTER_NOTE.encode()) >= 2
    assert b"Worker 79" in content


def test_empty_report_still_renders():
    content = render_company_report_pdf(_report([]), period="March 2026", generated_date="01/04/2026")

    assert b"No approved overtime for this period." in content
    assert b"Total Employees: 0 | Companies: 0" in content


def test_export_to_pdf_names_file():
    pdf_file = export_to_pdf(_report([_row(1)]), "HR_OT_Report_March_2026", period="March 2026", generated_date="01/04/2026")

    assert pdf_file.filename == "HR_OT_Report_March_2026.pdf"
    assert pdf_file.mimetype == "application/pdf"
    assert pdf_file.to_bytes().startswith(b"%PDF")
