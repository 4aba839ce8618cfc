# app/routers/vehicles.py
"""Read-only fleet roster for the attendance calendar's vehicle selector."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.database import get_db
from app.schemas.vehicle import VehicleOut
from app.services.record_store import SqlRecordStore

router = APIRouter()


@router.get("/vehicles", response_model=list[VehicleOut], summary="List roster vehicles")
def list_vehicles(include_inactive: bool = False, db: Session = Depends(get_db)):
    """Active roster ordered by vehicle number; include_inactive=true adds retired/swapped vehicles."""
    return SqlRecordStore(db).list_roster(active_only=not include_inactive)


@router.get("/vehicles/{vehicle_number}", response_model=VehicleOut, summary="Look up a vehicle")
def get_vehicle(vehicle_number: str, db: Session = Depends(get_db)):
    vehicle = SqlRecordStore(db).get_vehicle(vehicle_number)
    if not vehicle:
        raise HTTPException(status_code=404, detail=f"Vehicle '{vehicle_number}' not found")
    return vehicle
