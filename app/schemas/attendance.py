# app/schemas/attendance.py
from pydantic import BaseModel
from datetime import date, datetime
from typing import Dict, List, Optional


class OverrideIn(BaseModel):
    vehicle_number: str
    date: str                # YYYY-MM-DD, validated by the override service
    shift: str               # daily | morning | night (depends on SHIFT_MODE)
    status: str              # running | stopped | breakdown | leave
    notes: Optional[str] = None
    author_id: Optional[str] = None


class OverrideOut(BaseModel):
    vehicle_number: str
    date: date
    shift: str
    status: str
    notes: Optional[str]
    updated_at: Optional[datetime]
    author_id: Optional[str]

    class Config:
        from_attributes = True


class CellOut(BaseModel):
    vehicle_number: str
    date: date
    shift: str
    status: Optional[str]           # None = status unavailable
    label: str
    color: str
    rule: Optional[str] = None
    notes: Optional[str] = None
    driver_name: Optional[str] = None
    total_trips: Optional[int] = None
    total_earnings: Optional[float] = None


class StatusOut(CellOut):
    as_of: datetime


class VehicleRowOut(BaseModel):
    vehicle_number: str
    fleet_name: Optional[str]
    total_trips: int
    active_in_roster: bool
    cells: List[CellOut]


class WeeklyGridOut(BaseModel):
    week_offset: int
    week_start: date
    week_end: date
    dates: List[date]
    shifts: List[str]
    rows: List[VehicleRowOut]
    totals: Dict[str, int]
    unavailable: int


class WeekWindowOut(BaseModel):
    week_offset: int
    week_start: date
    week_end: date
    dates: List[date]


class StatusDisplayOut(BaseModel):
    status: str
    label: str
    color: str
    manual: bool
