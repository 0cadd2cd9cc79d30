"""Insert the demo laundry services and the admin/receptionist/staff accounts.

Safe to run repeatedly: services are only inserted when missing and demo
employees are upserted by username.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.laundry_system.laundry_system.common.logging_utils import setup_logging
from src.laundry_system.laundry_system.database.bootstrap import DEMO_EMPLOYEES, apply_seed_sql, ensure_demo_users


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_users(db_config)

    print(f"OK: Seeded services and {len(DEMO_EMPLOYEES)} demo employees -> {db_config.get('database')}")
    for username, _email, password, _gender, _dob, role in DEMO_EMPLOYEES:
        print(f"  {role:<14} {username} / {password}")


if __name__ == "__main__":
    main()
