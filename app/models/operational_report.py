# app/models/operational_report.py
"""
Driver shift reports submitted through the reporting workflow.
Only `approved` reports count as evidence that a shift was worked.
"""

from sqlalchemy import Column, Date, DateTime, Float, Integer, String, Index
from app.database import Base


class OperationalReport(Base):
    __tablename__ = "operational_reports"
    __table_args__ = (
        Index("ix_operational_reports_key", "vehicle_number", "shift_date", "shift"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_number = Column(String(50), nullable=False, index=True)
    shift_date = Column(Date, nullable=False, index=True)
    shift = Column(String(20), nullable=False)                 # daily | morning | night
    approval_state = Column(String(20), nullable=False, default="pending")  # pending | approved | rejected
    driver_name = Column(String(200))
    total_trips = Column(Integer, default=0)
    total_earnings = Column(Float, default=0.0)
    submitted_at = Column(DateTime)

    def __repr__(self):
        return (f"<OperationalReport {self.vehicle_number} {self.shift_date} "
                f"{self.shift} state={self.approval_state}>")
