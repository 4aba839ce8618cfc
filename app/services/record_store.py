# app/services/record_store.py
"""
SQL access to the three record kinds behind the attendance services.

Reads return plain snapshots (app.services.records) instead of ORM rows.
Override writes are a single upsert on the (vehicle_number, date, shift)
unique constraint, so racing writers leave exactly one row holding the
last applied payload. Any SQLAlchemy failure is rolled back and raised as StoreError.
"""

from datetime import date, datetime
from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.attendance_override import AttendanceOverride
from app.models.operational_report import OperationalReport
from app.models.vehicle import Vehicle
from app.services.operating_status import ApprovalState
from app.services.records import OverrideFacts, ReportFacts, VehicleFacts, WindowSnapshot
from app.utils.errors import StoreError
from app.utils.logger import get_logger

logger = get_logger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}
_OVERRIDE_KEY = ["vehicle_number", "date", "shift"]


def _vehicle_facts(row: Vehicle) -> VehicleFacts:
    return VehicleFacts(
        vehicle_number=row.vehicle_number,
        active_in_roster=bool(row.online),
        first_operational_date=row.first_operational_date,
        fleet_name=row.fleet_name,
        total_trips=row.total_trips or 0,
    )


def _override_facts(row: AttendanceOverride) -> OverrideFacts:
    return OverrideFacts(
        vehicle_number=row.vehicle_number,
        date=row.date,
        shift=row.shift,
        status=row.status,
        notes=row.notes,
        updated_at=row.updated_at,
        author_id=row.created_by,
    )


def _report_facts(row: OperationalReport) -> ReportFacts:
    return ReportFacts(
        vehicle_number=row.vehicle_number,
        shift_date=row.shift_date,
        shift=row.shift,
        approval_state=row.approval_state,
        driver_name=row.driver_name,
        total_trips=row.total_trips or 0,
        total_earnings=row.total_earnings or 0.0,
    )


class SqlRecordStore:
    """Record store over a SQLAlchemy session. One instance per request; holds nothing else."""

    def __init__(self, db: Session):
        self.db = db

    # ── Reads ─────────────────────────────────────────────────────────────
    def get_vehicle(self, vehicle_number: str) -> Optional[VehicleFacts]:
        try:
            row = self.db.query(Vehicle).filter(Vehicle.vehicle_number == vehicle_number).first()
        except SQLAlchemyError as e:
            raise self._fail(f"vehicle lookup for {vehicle_number}", e)
        return _vehicle_facts(row) if row else None

    def list_roster(self, active_only: bool = True) -> List[VehicleFacts]:
        try:
            q = self.db.query(Vehicle)
            if active_only:
                q = q.filter(Vehicle.online.is_(True))
            rows = q.order_by(Vehicle.vehicle_number).all()
        except SQLAlchemyError as e:
            raise self._fail("roster listing", e)
        return [_vehicle_facts(r) for r in rows]

    def find_override(self, vehicle_number: str, on_date: date, shift: str) -> Optional[OverrideFacts]:
        try:
            row = self._override_row(vehicle_number, on_date, shift)
        except SQLAlchemyError as e:
            raise self._fail(f"override lookup for {vehicle_number} {on_date} {shift}", e)
        return _override_facts(row) if row else None

    def find_approved_report(self, vehicle_number: str, on_date: date, shift: str) -> Optional[ReportFacts]:
        try:
            row = (
                self.db.query(OperationalReport)
                .filter(
                    OperationalReport.vehicle_number == vehicle_number,
                    OperationalReport.shift_date == on_date,
                    OperationalReport.shift == shift,
                    OperationalReport.approval_state == ApprovalState.APPROVED.value,
                )
                .order_by(OperationalReport.id.desc())
                .first()
            )
        except SQLAlchemyError as e:
            raise self._fail(f"report lookup for {vehicle_number} {on_date} {shift}", e)
        return _report_facts(row) if row else None

    def load_window(self, vehicle_number: str, start: date, end: date) -> WindowSnapshot:
        """Overrides and approved reports of one vehicle for start..end inclusive."""
        try:
            overrides = (
                self.db.query(AttendanceOverride)
                .filter(
                    AttendanceOverride.vehicle_number == vehicle_number,
                    AttendanceOverride.date >= start,
                    AttendanceOverride.date <= end,
                )
                .all()
            )
            reports = (
                self.db.query(OperationalReport)
                .filter(
                    OperationalReport.vehicle_number == vehicle_number,
                    OperationalReport.shift_date >= start,
                    OperationalReport.shift_date <= end,
                    OperationalReport.approval_state == ApprovalState.APPROVED.value,
                )
                .order_by(OperationalReport.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail(f"window read for {vehicle_number} {start}..{end}", e)

        snapshot = WindowSnapshot(vehicle_number=vehicle_number)
        for row in overrides:
            snapshot.overrides[(row.date, row.shift)] = _override_facts(row)
        for row in reports:
            # latest approved report per key wins
            snapshot.approved_reports[(row.shift_date, row.shift)] = _report_facts(row)
        return snapshot

    # ── Writes ────────────────────────────────────────────────────────────
    def upsert_override(self, vehicle_number: str, on_date: date, shift: str, status: str,
                        notes: Optional[str], author_id: Optional[str],
                        updated_at: Optional[datetime] = None) -> OverrideFacts:
        values = {
            "vehicle_number": vehicle_number,
            "date": on_date,
            "shift": shift,
            "status": status,
            "notes": notes,
            "updated_at": updated_at or datetime.utcnow(),
            "created_by": author_id,
        }
        try:
            insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
            if insert is not None:
                stmt = insert(AttendanceOverride).values(**values)
                stmt = stmt.on_conflict_do_update(
                    index_elements=_OVERRIDE_KEY,
                    set_={k: stmt.excluded[k] for k in ("status", "notes", "updated_at", "created_by")},
                )
                self.db.execute(stmt)
                self.db.commit()
            else:
                self._update_or_insert(values)
            row = self._override_row(vehicle_number, on_date, shift)
        except SQLAlchemyError as e:
            raise self._fail(f"override upsert for {vehicle_number} {on_date} {shift}", e)
        return _override_facts(row)

    def _update_or_insert(self, values: dict):
        """Upsert for dialects without ON CONFLICT. A lost insert race is retried as an update."""
        key = (values["vehicle_number"], values["date"], values["shift"])
        row = self._override_row(*key)
        if row is None:
            self.db.add(AttendanceOverride(**values))
        else:
            self._apply(row, values)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.info(f"[OVERRIDE] Insert race on {key}, applying as update")
            row = self._override_row(*key)
            self._apply(row, values)
            self.db.commit()

    @staticmethod
    def _apply(row: AttendanceOverride, values: dict):
        row.status = values["status"]
        row.notes = values["notes"]
        row.updated_at = values["updated_at"]
        row.created_by = values["created_by"]

    def _override_row(self, vehicle_number: str, on_date: date, shift: str) -> Optional[AttendanceOverride]:
        return (
            self.db.query(AttendanceOverride)
            .filter(
                AttendanceOverride.vehicle_number == vehicle_number,
                AttendanceOverride.date == on_date,
                AttendanceOverride.shift == shift,
            )
            .first()
        )

    def _fail(self, what: str, exc: Exception) -> StoreError:
        try:
            self.db.rollback()
        except SQLAlchemyError:
            logger.warning(f"[STORE] Rollback after failed {what} also failed")
        logger.error(f"[STORE] {what} failed: {exc}", exc_info=True)
        return StoreError(f"Record store failure during {what}", cause=exc)
