# app/routers/attendance.py
"""
Vehicle attendance calendar endpoints.
GET /attendance/status     — derived status of one (vehicle, date, shift)
PUT /attendance/override   — manual status entry (upsert per key)
GET /attendance/weekly     — weekly grid + per-status totals
GET /attendance/window     — the 7 dates of a week offset
GET /attendance/statuses   — status labels/colours and which are manual

ValidationError → 422 and StoreError → 503 are mapped in app.main.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from app.database import get_db
from app.schemas.attendance import (
    CellOut,
    OverrideIn,
    OverrideOut,
    StatusDisplayOut,
    StatusOut,
    VehicleRowOut,
    WeeklyGridOut,
    WeekWindowOut,
)
from app.services.attendance_service import AttendanceCell, get_cell
from app.services.calendar_window import week_bounds, week_window
from app.services.operating_status import MANUAL_STATUSES, STATUS_DISPLAY
from app.services.override_service import set_override
from app.services.record_store import SqlRecordStore
from app.services.status_derivation import business_now
from app.services.weekly_aggregator import ALL_VEHICLES, get_weekly_grid
from app.utils.input_parser import parse_week_offset

router = APIRouter()

UNAVAILABLE_LABEL = ("Unavailable", "gray")


def _cell_out(cell: AttendanceCell) -> dict:
    label, color = STATUS_DISPLAY[cell.status] if cell.status is not None else UNAVAILABLE_LABEL
    return {
        "vehicle_number": cell.vehicle_number,
        "date": cell.date,
        "shift": cell.shift,
        "status": cell.status.value if cell.status is not None else None,
        "label": label,
        "color": color,
        "rule": cell.rule,
        "notes": cell.notes,
        "driver_name": cell.driver_name,
        "total_trips": cell.total_trips,
        "total_earnings": cell.total_earnings,
    }


@router.get("/attendance/status", response_model=StatusOut, summary="Derived status of one vehicle shift")
def get_attendance_status(vehicle_number: str, date: str, shift: str, db: Session = Depends(get_db)):
    now = business_now()
    cell = get_cell(SqlRecordStore(db), vehicle_number, date, shift, now)
    return {**_cell_out(cell), "as_of": now}


@router.put("/attendance/override", response_model=OverrideOut, summary="Set a manual vehicle status")
def put_attendance_override(body: OverrideIn, db: Session = Depends(get_db)):
    """
    Create or replace the manual status for (vehicle, date, shift).
    Only running / stopped / breakdown / leave are accepted.
    Safe to retry: a repeated write updates the same row.
    """
    return set_override(
        SqlRecordStore(db),
        body.vehicle_number,
        body.date,
        body.shift,
        body.status,
        notes=body.notes,
        author_id=body.author_id,
    )


@router.get("/attendance/weekly", response_model=WeeklyGridOut, summary="Weekly vehicle attendance grid")
def get_weekly_attendance(
    week_offset: int = 0,
    vehicle_number: Optional[List[str]] = Query(None),
    db: Session = Depends(get_db),
):
    """
    One row per vehicle, one cell per date × shift.
    vehicle_number may repeat; omit it (or pass "all") for the active roster.
    """
    vehicles = vehicle_number
    if not vehicles or ALL_VEHICLES in vehicles:
        vehicles = ALL_VEHICLES
    grid = get_weekly_grid(SqlRecordStore(db), vehicles, week_offset, business_now())

    rows = [
        VehicleRowOut(
            vehicle_number=v.vehicle_number,
            fleet_name=v.fleet_name,
            total_trips=v.total_trips,
            active_in_roster=v.active_in_roster,
            cells=[CellOut(**_cell_out(c)) for c in grid.row(v.vehicle_number)],
        )
        for v in grid.vehicles
    ]
    return WeeklyGridOut(
        week_offset=week_offset,
        week_start=grid.week_start,
        week_end=grid.week_end,
        dates=grid.dates,
        shifts=list(grid.shifts),
        rows=rows,
        totals={status.value: count for status, count in grid.totals.items()},
        unavailable=grid.unavailable,
    )


@router.get("/attendance/window", response_model=WeekWindowOut, summary="Dates of a calendar week")
def get_week_window(week_offset: int = 0):
    offset = parse_week_offset(week_offset)
    now = business_now()
    start, end = week_bounds(now, offset)
    return {"week_offset": offset, "week_start": start, "week_end": end, "dates": week_window(now, offset)}


@router.get("/attendance/statuses", response_model=list[StatusDisplayOut], summary="Status labels and colours")
def list_statuses():
    return [
        {"status": status.value, "label": label, "color": color, "manual": status in MANUAL_STATUSES}
        for status, (label, color) in STATUS_DISPLAY.items()
    ]
