"""Example: drive the service layer directly, without Flask.

Controllers stay thin; the same calls back the JSON API.
"""

import importlib
import logging
import sys

from dotenv import load_dotenv

from duty_attendance.config import get_settings_module
from duty_attendance.container import build_container
from duty_attendance.core.exceptions import DomainError


def main(session_id: int = 1) -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    try:
        report = container.report_service.build_report(session_id)
    except DomainError as e:
        logging.getLogger("example").error("Cannot build report: %s", e)
        raise SystemExit(1) from e

    sys.stdout.write(report.text + "\n")


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else 1)
