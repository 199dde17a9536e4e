"""Example: build the monthly company OT report from the service layer (no Flask).

Usage: python -m examples.example_usage 2026-01
"""

import importlib
import sys

from config import get_settings_module

from src.otms.otms.common.datetime_utils import parse_month
from src.otms.otms.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    month = parse_month(sys.argv[1] if len(sys.argv) > 1 else "")
    csv_file = container.report_service.export_company_report_csv(month=month)
    with open(csv_file.filename, "wb") as fh:
        fh.write(csv_file.to_bytes())
    print(f"Wrote {csv_file.filename}")


if __name__ == "__main__":
    main()
