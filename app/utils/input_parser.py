# app/utils/input_parser.py
"""
Validation helpers for attendance request input.
Every helper either returns a clean value or raises ValidationError,
so malformed input is rejected before any derivation or store call.
"""

from datetime import date, datetime
from typing import Optional

from app.config import settings
from app.services.operating_status import MANUAL_STATUSES, OperatingStatus, shifts_for_mode
from app.utils.errors import ValidationError


def parse_date(value, field: str = "date") -> date:
    """Accepts a date, a datetime, or an ISO "YYYY-MM-DD" string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise ValidationError(f"Invalid {field}: {value!r} (expected YYYY-MM-DD)", field=field)


def parse_vehicle_number(value, field: str = "vehicle_number") -> str:
    code = value.strip() if isinstance(value, str) else ""
    if not code:
        raise ValidationError("Vehicle number is required", field=field)
    return code


def parse_shift(value, mode: Optional[str] = None) -> str:
    """Shift must be one the deployment's shift mode tracks (daily, or morning/night)."""
    allowed = [s.value for s in shifts_for_mode(mode or settings.SHIFT_MODE)]
    shift = getattr(value, "value", value)
    if isinstance(shift, str):
        shift = shift.strip().lower()
    if shift not in allowed:
        raise ValidationError(f"Invalid shift {value!r}; expected one of {allowed}", field="shift")
    return shift


def parse_manual_status(value) -> OperatingStatus:
    raw = getattr(value, "value", value)
    try:
        status = OperatingStatus(raw.strip().lower() if isinstance(raw, str) else raw)
    except ValueError:
        status = None
    if status not in MANUAL_STATUSES:
        allowed = sorted(s.value for s in MANUAL_STATUSES)
        raise ValidationError(f"Status {raw!r} cannot be set manually; expected one of {allowed}",
                              field="status")
    return status


def parse_week_offset(value) -> int:
    try:
        offset = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid week offset: {value!r}", field="week_offset")
    if abs(offset) > settings.MAX_WEEK_OFFSET:
        raise ValidationError(
            f"Week offset {offset} is outside ±{settings.MAX_WEEK_OFFSET}", field="week_offset")
    return offset


def clean_notes(value: Optional[str]) -> Optional[str]:
    """Blank notes are stored as NULL."""
    if value is None:
        return None
    notes = str(value).strip()
    return notes or None
