"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the work-log lifecycle and payroll rules live in
the services.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.pharmacy_payroll.pharmacy_payroll.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    staff = container.profiles_repo.get_by_email("staff@jpharm.example")
    if not staff:
        print("Run scripts/seed_db.py first.")
        return

    actor = container.profile_service.get_actor(staff.id)
    report = container.payroll_service.summary_for(actor, days=30)
    print(report.to_dict())


if __name__ == "__main__":
    main()
