from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv

from hr_admin.config import get_settings_module
from hr_admin.database.bootstrap import apply_schema, apply_seed_sql


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    root = Path(__file__).resolve().parents[1]
    apply_schema(db_config, schema_path=root / "database" / "schema.sql")
    apply_seed_sql(db_config, seed_path=root / "database" / "seed.sql")
    print(f"OK: Seeded demo data into {db_config.get('database')}")


if __name__ == "__main__":
    main()
