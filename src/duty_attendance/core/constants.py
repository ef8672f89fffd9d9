"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_PASSWORD_LENGTH = 6
REPORT_DATE_FORMAT = "%a %b %d %Y"
REPORT_FILENAME_TEMPLATE = "attendance-report-{session_id}.txt"

# Partial updates: "leave this field as it is" (None means "clear it").
UNCHANGED = object()
