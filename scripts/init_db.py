"""Create the daily_mate database (if missing) and apply database/schema.sql.

Usage: APP_ENV=production python scripts/init_db.py
"""
from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module, load_settings

from src.daily_mate.daily_mate.database.bootstrap import apply_schema, list_tables
from src.daily_mate.daily_mate.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    target = DBConfig.from_mapping(settings.DB_CONFIG)

    apply_schema(settings.DB_CONFIG, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(settings.DB_CONFIG)
    print(f"[daily-mate] {get_settings_module()}: {target.user}@{target.host}:{target.port}/{target.database}")
    print(f"[daily-mate] tables: {', '.join(sorted(tables)) or '-'}")


if __name__ == "__main__":
    main()
