# app/services/weekly_aggregator.py
"""
Weekly attendance grid: derive the status of every (vehicle × date × shift)
cell in a 7-day window and count cells per status for the summary cards.

Re-derived from current data on every call; nothing is cached, so an override
write shows up on the next read. Each vehicle's overrides and approved reports
are read in one window snapshot. If that read fails, the vehicle's cells come
back as unavailable (status None) and stay out of the totals.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from app.config import settings
from app.services.attendance_service import AttendanceCell, describe_cell, unavailable_cell
from app.services.calendar_window import week_window
from app.services.operating_status import OperatingStatus, shifts_for_mode
from app.services.records import CellKey, VehicleFacts
from app.services.status_derivation import business_now
from app.utils.errors import StoreError, ValidationError
from app.utils.input_parser import parse_shift, parse_vehicle_number, parse_week_offset
from app.utils.logger import get_logger

logger = get_logger(__name__)

ALL_VEHICLES = "all"


@dataclass
class WeeklyGrid:
    dates: List[date]
    shifts: Tuple[str, ...]
    vehicles: List[VehicleFacts] = field(default_factory=list)
    cells: Dict[CellKey, AttendanceCell] = field(default_factory=dict)
    totals: Dict[OperatingStatus, int] = field(default_factory=lambda: empty_totals())
    unavailable: int = 0

    @property
    def week_start(self) -> Optional[date]:
        return self.dates[0] if self.dates else None

    @property
    def week_end(self) -> Optional[date]:
        return self.dates[-1] if self.dates else None

    def row(self, vehicle_number: str) -> List[AttendanceCell]:
        """Cells of one vehicle in date-then-shift order."""
        return [self.cells[(vehicle_number, d, s)]
                for d in self.dates for s in self.shifts
                if (vehicle_number, d, s) in self.cells]


def empty_totals() -> Dict[OperatingStatus, int]:
    return {status: 0 for status in OperatingStatus}


def tally(cells: Iterable[AttendanceCell]) -> Tuple[Dict[OperatingStatus, int], int]:
    """Per-status counts plus the number of unavailable cells."""
    totals = empty_totals()
    unavailable = 0
    for cell in cells:
        if cell.status is None:
            unavailable += 1
        else:
            totals[cell.status] += 1
    return totals, unavailable


def resolve_vehicles(store, vehicles) -> List[VehicleFacts]:
    """None / "all" → active roster; a code or list of codes → those vehicles, in order."""
    if vehicles is None or vehicles == ALL_VEHICLES:
        return store.list_roster(active_only=True)
    if isinstance(vehicles, str):
        vehicles = [vehicles]

    resolved = []
    seen = set()
    for raw in vehicles:
        code = parse_vehicle_number(raw)
        if code in seen:
            continue
        seen.add(code)
        vehicle = store.get_vehicle(code)
        if vehicle is None:
            raise ValidationError(f"Vehicle '{code}' not found", field="vehicle_number")
        resolved.append(vehicle)
    return resolved


def build_grid(store, vehicles: Sequence[VehicleFacts], dates: List[date],
               shifts: Tuple[str, ...], now) -> WeeklyGrid:
    grid = WeeklyGrid(dates=list(dates), shifts=tuple(shifts), vehicles=list(vehicles))
    if not grid.dates or not grid.shifts:
        return grid

    start, end = grid.dates[0], grid.dates[-1]
    for vehicle in grid.vehicles:
        code = vehicle.vehicle_number
        try:
            snapshot = store.load_window(code, start, end)
        except StoreError as e:
            logger.warning(f"[WEEKLY] {code}: window read failed, cells unavailable ({e.message})")
            for d in grid.dates:
                for s in grid.shifts:
                    grid.cells[(code, d, s)] = unavailable_cell(code, d, s)
            continue

        for d in grid.dates:
            for s in grid.shifts:
                grid.cells[(code, d, s)] = describe_cell(
                    vehicle, d, s, now,
                    override=snapshot.override_for(d, s),
                    approved_report=snapshot.report_for(d, s),
                )

    grid.totals, grid.unavailable = tally(grid.cells.values())
    return grid


def get_weekly_grid(store, vehicles=None, week_offset=0, now=None, shifts=None) -> WeeklyGrid:
    """
    Status grid and per-status totals for week `week_offset` relative to `now`.
    `vehicles` is "all"/None (active roster) or explicit vehicle numbers;
    `shifts` defaults to the shifts of the configured SHIFT_MODE.
    """
    now = now or business_now()
    offset = parse_week_offset(week_offset)
    dates = week_window(now, offset)
    if shifts is None:
        shift_ids = tuple(s.value for s in shifts_for_mode(settings.SHIFT_MODE))
    else:
        shift_ids = tuple(dict.fromkeys(parse_shift(s) for s in shifts))

    roster = resolve_vehicles(store, vehicles)
    grid = build_grid(store, roster, dates, shift_ids, now)
    logger.debug(
        f"[WEEKLY] {dates[0]}..{dates[-1]} vehicles={len(roster)} shifts={list(shift_ids)} "
        f"unavailable={grid.unavailable}"
    )
    return grid
