"""Create the database and tables from database/schema.sql.

Usage: python scripts/init_db.py [--seed]
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.pharmacy_payroll.pharmacy_payroll.database.bootstrap import apply_schema, ensure_demo_profiles, list_tables

EXPECTED_TABLES = {"profiles", "work_logs"}


def main(argv: list[str]) -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    target = f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if "--seed" in argv:
        ensure_demo_profiles(db_config)

    tables = set(list_tables(db_config))
    missing = EXPECTED_TABLES - tables
    if missing:
        print(f"FAILED: {target} is missing tables: {', '.join(sorted(missing))}")
        return 1

    print(f"OK: {target} ({', '.join(sorted(tables))})")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
