"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

CURRENCY_PREFIX = "RM"

# Malaysian Employment Act basis: ORP = basic / 26 days, HRP = ORP / 8 hours
WORKING_DAYS_PER_MONTH = 26
NORMAL_HOURS_PER_DAY = 8

UNKNOWN_COMPANY_ID = "unknown"
UNKNOWN_COMPANY_NAME = "Unknown Company"
UNKNOWN_EMPLOYEE_NAME = "Unknown"
NOT_AVAILABLE = "N/A"

CSV_MIMETYPE = "text/csv;charset=utf-8;"
PDF_MIMETYPE = "application/pdf"
