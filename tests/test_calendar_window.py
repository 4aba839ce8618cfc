# tests/test_calendar_window.py
"""Unit tests for week window selection (Monday start)."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from datetime import date, datetime
from app.services.calendar_window import week_bounds, week_start, week_window


class TestWeekWindow:
    def test_current_week_starts_on_monday(self):
        # 2024-02-01 is a Thursday
        days = week_window(datetime(2024, 2, 1, 12, 0), 0)
        assert days[0] == date(2024, 1, 29)
        assert days[-1] == date(2024, 2, 4)
        assert [d.weekday() for d in days] == list(range(7))

    def test_monday_and_sunday_stay_in_their_week(self):
        assert week_start(date(2024, 1, 29)) == date(2024, 1, 29)
        assert week_start(date(2024, 2, 4)) == date(2024, 1, 29)

    def test_offsets_move_whole_weeks(self):
        now = datetime(2024, 2, 1)
        assert week_start(now, -1) == date(2024, 1, 22)
        assert week_start(now, 1) == date(2024, 2, 5)
        assert week_start(now, -5) == date(2023, 12, 25)

    def test_seven_consecutive_dates(self):
        days = week_window(date(2024, 12, 31), 0)
        assert len(days) == 7
        assert all((b - a).days == 1 for a, b in zip(days, days[1:]))
        assert days[0] == date(2024, 12, 30)

    def test_bounds_match_window(self):
        now = datetime(2024, 2, 1)
        days = week_window(now, 2)
        assert week_bounds(now, 2) == (days[0], days[-1])
