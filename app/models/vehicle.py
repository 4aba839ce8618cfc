# app/models/vehicle.py
"""
Fleet roster table.
Owned by the fleet-management workflow; the attendance services only read
`online` (active in roster) and `first_operational_date`.
"""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_number = Column(String(50), unique=True, nullable=False, index=True)
    fleet_name = Column(String(200))
    total_trips = Column(Integer, default=0, nullable=False)
    online = Column(Boolean, default=True, nullable=False)   # False once retired/swapped out
    first_operational_date = Column(Date)                     # first approved report, NULL if never
    offline_from_date = Column(DateTime)

    def __repr__(self):
        return f"<Vehicle {self.vehicle_number} online={self.online}>"
