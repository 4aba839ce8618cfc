# Fleet Attendance — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.vehicle import Vehicle                              # noqa
from app.models.operational_report import OperationalReport         # noqa
from app.models.attendance_override import AttendanceOverride       # noqa
