"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the calendar and payroll rules live in services.
"""

from datetime import date

from src.salon_calendar.salon_calendar.container import build_container
from src.salon_calendar.salon_calendar.payroll.model import StaffCompensation
from src.salon_calendar.salon_calendar.settings.loader import load_hours_of_operation, save_business_settings


def main():
    container = build_container()
    save_business_settings(container.settings_store, timezone="America/Edmonton")

    table = load_hours_of_operation(container.settings_store)
    print(container.clock.timezone_name(), container.clock.today_string())
    print(container.hours_service.slots_for_date(date(2025, 2, 3), table, 30))

    plan = StaffCompensation(type="hourly-plus-commission", hourly_rate=18, commission_rate=10)
    print(container.payroll_service.statement(plan, 44, 2500).to_dict())


if __name__ == "__main__":
    main()
