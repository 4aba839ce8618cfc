# app/services/records.py
"""
Plain snapshots of the three record kinds the attendance services read.
The record store converts ORM rows into these so derivation never touches a session.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class VehicleFacts:
    vehicle_number: str
    active_in_roster: bool
    first_operational_date: Optional[date] = None
    fleet_name: Optional[str] = None
    total_trips: int = 0


@dataclass(frozen=True)
class OverrideFacts:
    vehicle_number: str
    date: date
    shift: str
    status: str
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None
    author_id: Optional[str] = None


@dataclass(frozen=True)
class ReportFacts:
    vehicle_number: str
    shift_date: date
    shift: str
    approval_state: str
    driver_name: Optional[str] = None
    total_trips: int = 0
    total_earnings: float = 0.0


CellKey = Tuple[str, date, str]   # (vehicle_number, date, shift)


@dataclass
class WindowSnapshot:
    """Overrides and approved reports of one vehicle over a date range, keyed by (date, shift)."""
    vehicle_number: str
    overrides: Dict[Tuple[date, str], OverrideFacts] = field(default_factory=dict)
    approved_reports: Dict[Tuple[date, str], ReportFacts] = field(default_factory=dict)

    def override_for(self, on_date: date, shift: str) -> Optional[OverrideFacts]:
        return self.overrides.get((on_date, shift))

    def report_for(self, on_date: date, shift: str) -> Optional[ReportFacts]:
        return self.approved_reports.get((on_date, shift))
