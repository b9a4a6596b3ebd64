# core/config.py
import os
from datetime import date
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///pojangmacha.db")
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@pojangmacha.com")

# Date range picker
DATE_RANGE_PLACEHOLDER = os.getenv("DATE_RANGE_PLACEHOLDER", "Select date range")
YEAR_VIEW_SPAN = int(os.getenv("YEAR_VIEW_SPAN", "10"))

# Sales report host screen
REPORT_DEFAULT_DAYS = int(os.getenv("REPORT_DEFAULT_DAYS", "7"))
_report_min = os.getenv("REPORT_MIN_DATE")
REPORT_MIN_DATE = date.fromisoformat(_report_min) if _report_min else None
