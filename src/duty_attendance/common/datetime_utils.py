from __future__ import annotations

from datetime import date, datetime

from ..core.constants import REPORT_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_report_date(value: date) -> str:
    """Render a date the way reports print it, e.g. ``Mon Jan 05 2026``."""
    return value.strftime(REPORT_DATE_FORMAT)
