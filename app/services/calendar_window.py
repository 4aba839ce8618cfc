# app/services/calendar_window.py
"""
Week window selection for the attendance calendar.
Weeks start on Monday; offset 0 is the week containing "today", -1 the previous week.
"""

from datetime import date, timedelta
from typing import List, Tuple

from app.services.status_derivation import business_today

WEEK_STARTS_ON = 0   # Monday, as date.weekday()
DAYS_IN_WEEK = 7


def week_start(now, offset: int = 0) -> date:
    today = business_today(now)
    monday = today - timedelta(days=(today.weekday() - WEEK_STARTS_ON) % DAYS_IN_WEEK)
    return monday + timedelta(weeks=offset)


def week_window(now, offset: int = 0) -> List[date]:
    """The 7 consecutive dates (Monday → Sunday) of week `offset` relative to `now`."""
    start = week_start(now, offset)
    return [start + timedelta(days=i) for i in range(DAYS_IN_WEEK)]


def week_bounds(now, offset: int = 0) -> Tuple[date, date]:
    start = week_start(now, offset)
    return start, start + timedelta(days=DAYS_IN_WEEK - 1)
