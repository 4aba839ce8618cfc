# app/services/operating_status.py
"""
Closed value sets used across the attendance services:
operating statuses, shifts, shift modes and report approval states.
"""

from enum import Enum


class OperatingStatus(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"
    BREAKDOWN = "breakdown"
    LEAVE = "leave"
    OFFLINE = "offline"          # today/future, not reported yet
    SWAPPED = "swapped"          # past gap, vehicle has since left the roster
    NOT_ACTIVE = "not_active"    # before the vehicle first operated


# Operator judgments. offline/swapped/not_active encode temporal or lifecycle facts
# and may only come out of derivation.
MANUAL_STATUSES = frozenset({
    OperatingStatus.RUNNING,
    OperatingStatus.STOPPED,
    OperatingStatus.BREAKDOWN,
    OperatingStatus.LEAVE,
})

# status → (label, colour) for dashboards
STATUS_DISPLAY = {
    OperatingStatus.RUNNING:    ("Running", "green"),
    OperatingStatus.STOPPED:    ("Stopped", "yellow"),
    OperatingStatus.BREAKDOWN:  ("Breakdown", "red"),
    OperatingStatus.LEAVE:      ("Leave", "blue"),
    OperatingStatus.OFFLINE:    ("Offline", "gray"),
    OperatingStatus.SWAPPED:    ("Swapped", "purple"),
    OperatingStatus.NOT_ACTIVE: ("Not Active", "slate"),
}


class Shift(str, Enum):
    DAILY = "daily"
    MORNING = "morning"
    NIGHT = "night"


class ShiftMode(str, Enum):
    DAILY = "daily"
    SPLIT = "split"


SHIFTS_BY_MODE = {
    ShiftMode.DAILY: (Shift.DAILY,),
    ShiftMode.SPLIT: (Shift.MORNING, Shift.NIGHT),
}


class ApprovalState(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def shifts_for_mode(mode) -> tuple:
    """Shift identifiers tracked by a deployment running in `mode` ("daily" or "split")."""
    return SHIFTS_BY_MODE[ShiftMode(mode)]

