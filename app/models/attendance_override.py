# app/models/attendance_override.py
"""
Manual vehicle attendance entries (table name kept as `vehicle_attendance`).
One row per (vehicle_number, date, shift), enforced by a unique constraint;
writes go through an upsert so a second write for the same key updates in place.
"""

from sqlalchemy import Column, Date, DateTime, Integer, String, Text, UniqueConstraint
from app.database import Base


class AttendanceOverride(Base):
    __tablename__ = "vehicle_attendance"
    __table_args__ = (
        UniqueConstraint("vehicle_number", "date", "shift", name="uq_vehicle_attendance_key"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_number = Column(String(50), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    shift = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False)    # running | stopped | breakdown | leave
    notes = Column(Text)
    updated_at = Column(DateTime, nullable=False)
    created_by = Column(String(100))

    def __repr__(self):
        return f"<AttendanceOverride {self.vehicle_number} {self.date} {self.shift} status={self.status}>"
