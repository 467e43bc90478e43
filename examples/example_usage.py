"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the HR logic lives in services and the report builder.
"""

import importlib

from dotenv import load_dotenv

from hr_admin.config import get_settings_module
from hr_admin.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for entry in container.report_service.build():
        print(entry.to_dict())


if __name__ == "__main__":
    main()
