"""Load demo rows (books, members, employees, shifts, loans) and the admin account."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.staff_management.staff_management.container import build_container
from src.staff_management.staff_management.database.bootstrap import apply_seed_sql


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    container = build_container(db_config=db_config, upload_root=REPO_ROOT / "static")
    container.admin_service.ensure_admin_user(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)

    print(
        "OK: seeded -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(admin={settings.ADMIN_EMAIL})"
    )


if __name__ == "__main__":
    main()
