# app/schemas/vehicle.py
from pydantic import BaseModel
from datetime import date
from typing import Optional


class VehicleOut(BaseModel):
    vehicle_number: str
    fleet_name: Optional[str]
    total_trips: int
    active_in_roster: bool
    first_operational_date: Optional[date]

    class Config:
        from_attributes = True
