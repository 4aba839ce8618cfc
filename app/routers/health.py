# app/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB + the active attendance configuration.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from app.database import get_db
from app.config import settings
from app.services.operating_status import shifts_for_mode
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Shift mode and business timezone in use
    """
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "database": "unknown",
        "shift_mode": settings.SHIFT_MODE,
        "shifts": [s.value for s in shifts_for_mode(settings.SHIFT_MODE)],
        "timezone": settings.TIMEZONE,
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except Exception as e:
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
