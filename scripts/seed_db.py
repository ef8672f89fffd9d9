from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from duty_attendance.config import get_settings_module
from duty_attendance.database.bootstrap import ensure_demo_users

logger = logging.getLogger("seed_db")


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")

    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)
    logger.info("Demo accounts ready in %s/%s", db_config.get("host"), db_config.get("database"))


if __name__ == "__main__":
    main()
