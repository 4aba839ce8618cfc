# app/services/override_service.py
"""
Manual attendance entry: validate, then upsert one override per (vehicle, date, shift).

Only running/stopped/breakdown/leave may be hand-assigned. Nothing is written
when validation fails, and store failures propagate unchanged (no retry here;
the upsert is idempotent by key, so callers may retry).
Derived statuses are recomputed on every read, so there is no cache to invalidate.
"""

from datetime import datetime
from typing import Optional

from app.services.records import OverrideFacts
from app.utils.input_parser import (
    clean_notes,
    parse_date,
    parse_manual_status,
    parse_shift,
    parse_vehicle_number,
)
from app.utils.errors import ValidationError
from app.utils.logger import get_logger

logger = get_logger(__name__)


def set_override(store, vehicle_number, on_date, shift, status, notes=None,
                 author_id: Optional[str] = None, now: Optional[datetime] = None) -> OverrideFacts:
    try:
        code = parse_vehicle_number(vehicle_number)
        day = parse_date(on_date)
        shift_id = parse_shift(shift)
        manual_status = parse_manual_status(status)
    except ValidationError as e:
        logger.warning(f"[OVERRIDE] Rejected {vehicle_number}/{on_date}/{shift}: {e.message}")
        raise

    saved = store.upsert_override(
        code,
        day,
        shift_id,
        manual_status.value,
        clean_notes(notes),
        author_id,
        updated_at=now or datetime.utcnow(),
    )
    logger.info(f"[OVERRIDE] {code} {day} {shift_id} → {manual_status.value} (by {author_id or 'unknown'})")
    return saved
