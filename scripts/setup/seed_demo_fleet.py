# scripts/setup/seed_demo_fleet.py
"""
Seed a small demo fleet with approved reports for the current week.
The fleet and reporting workflows own these tables in production; this is for local runs only.
Usage: python scripts/setup/seed_demo_fleet.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from datetime import datetime, timedelta

from app.config import settings
from app.database import SessionLocal, create_tables
from app.models.operational_report import OperationalReport
from app.models.vehicle import Vehicle
from app.services.calendar_window import week_window
from app.services.operating_status import shifts_for_mode
from app.services.status_derivation import business_now, business_today

# (vehicle_number, fleet_name, online, days since first report or None)
DEMO_VEHICLES = [
    ("V1", "North Fleet", True, 60),
    ("V2", "North Fleet", True, 3),       # onboarded mid-week
    ("V3", "South Fleet", False, 90),     # retired from the roster
    ("V4", "South Fleet", True, None),    # never reported
]


def main():
    print("🚗 Seeding demo fleet")
    print("=" * 40)
    create_tables()
    now = business_now()
    today = business_today(now)
    shifts = [s.value for s in shifts_for_mode(settings.SHIFT_MODE)]

    db = SessionLocal()
    try:
        for number, fleet, online, first_days in DEMO_VEHICLES:
            if db.query(Vehicle).filter(Vehicle.vehicle_number == number).first():
                print(f"   • {number} already present, skipped")
                continue
            first_date = today - timedelta(days=first_days) if first_days is not None else None
            db.add(Vehicle(vehicle_number=number, fleet_name=fleet, online=online,
                           first_operational_date=first_date, total_trips=0,
                           offline_from_date=None if online else datetime.utcnow()))

            # approved report for the first shift of every past weekday this week
            for day in week_window(now):
                if first_date is None or day < first_date or day >= today or day.weekday() == 6:
                    continue
                db.add(OperationalReport(vehicle_number=number, shift_date=day, shift=shifts[0],
                                         approval_state="approved", driver_name=f"Driver {number}",
                                         total_trips=12, total_earnings=2400.0,
                                         submitted_at=datetime.utcnow()))
            print(f"   ✓ {number} ({fleet}, online={online}, first report={first_date})")
        db.commit()
    finally:
        db.close()

    print("\n🎉 Demo fleet ready. Try:")
    print("   python scripts/test/simulate_override.py --vehicle V1 --status breakdown")


if __name__ == "__main__":
    main()
