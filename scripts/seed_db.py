from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from emargement.config import get_settings_module
from emargement.database.bootstrap import ensure_demo_users
from emargement.database.connection import DBConfig

logger = logging.getLogger("seed_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config, password_method=settings.PASSWORD_HASH_METHOD)
    logger.info("Seeded demo trainer and student -> %s", DBConfig.from_dict(db_config).describe())


if __name__ == "__main__":
    main()
