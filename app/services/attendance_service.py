# app/services/attendance_service.py
"""
Single-cell status reads: fetch the vehicle, its override and its approved
report for one (vehicle, date, shift), then derive.
Store failures surface as StoreError ("status unavailable"), never as a default status.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from app.services.operating_status import OperatingStatus
from app.services.records import OverrideFacts, ReportFacts, VehicleFacts
from app.services.status_derivation import explain_status
from app.utils.errors import ValidationError
from app.utils.input_parser import parse_date, parse_shift, parse_vehicle_number
from app.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AttendanceCell:
    vehicle_number: str
    date: date
    shift: str
    status: Optional[OperatingStatus]     # None = status unavailable
    rule: Optional[str] = None
    notes: Optional[str] = None
    driver_name: Optional[str] = None
    total_trips: Optional[int] = None
    total_earnings: Optional[float] = None


def describe_cell(vehicle: VehicleFacts, on_date: date, shift: str, now,
                  override: Optional[OverrideFacts] = None,
                  approved_report: Optional[ReportFacts] = None) -> AttendanceCell:
    """Derived status plus the annotations a calendar cell shows (override notes, report figures)."""
    decision = explain_status(vehicle, on_date, shift, now, override, approved_report)
    cell = AttendanceCell(
        vehicle_number=vehicle.vehicle_number,
        date=on_date,
        shift=shift,
        status=decision.status,
        rule=decision.rule,
    )
    if override is not None:
        cell.notes = override.notes
    if approved_report is not None:
        cell.driver_name = approved_report.driver_name
        cell.total_trips = approved_report.total_trips
        cell.total_earnings = approved_report.total_earnings
    return cell


def unavailable_cell(vehicle_number: str, on_date: date, shift: str) -> AttendanceCell:
    return AttendanceCell(vehicle_number=vehicle_number, date=on_date, shift=shift, status=None)


def _load_vehicle(store, code: str) -> VehicleFacts:
    vehicle = store.get_vehicle(code)
    if vehicle is None:
        logger.warning(f"[STATUS] Unknown vehicle {code}")
        raise ValidationError(f"Vehicle '{code}' not found", field="vehicle_number")
    return vehicle


def get_cell(store, vehicle_number, on_date, shift, now) -> AttendanceCell:
    code = parse_vehicle_number(vehicle_number)
    day = parse_date(on_date)
    shift_id = parse_shift(shift)

    vehicle = _load_vehicle(store, code)
    override = store.find_override(code, day, shift_id)
    report = store.find_approved_report(code, day, shift_id)
    return describe_cell(vehicle, day, shift_id, now, override, report)


def get_status(store, vehicle_number, on_date, shift, now) -> OperatingStatus:
    """Authoritative status for one (vehicle, date, shift) as of `now`. get_cell also names the rule."""
    return get_cell(store, vehicle_number, on_date, shift, now).status
