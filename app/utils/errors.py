# app/utils/errors.py
"""
Error taxonomy shared by services and routers.
ValidationError → caller fixes input (HTTP 422).
StoreError      → the database failed; status is shown as unavailable (HTTP 503).
"""


class AttendanceError(Exception):
    """Base class for errors raised by the attendance services."""


class ValidationError(AttendanceError):
    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.message = message
        self.field = field


class StoreError(AttendanceError):
    """Wraps a database failure. Callers may retry override writes safely (upsert by key)."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
