# tests/test_override_service.py
"""Unit tests for the manual override write path."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock
from datetime import date, datetime
from app.config import settings
from app.services.override_service import set_override
from app.utils.errors import StoreError, ValidationError

NOW = datetime(2024, 2, 1, 10, 0)


class TestOverrideValidation:
    @pytest.mark.parametrize("status", ["offline", "swapped", "not_active", "maintenance", "", None])
    def test_non_manual_status_rejected_before_store(self, status):
        store = MagicMock()
        with pytest.raises(ValidationError) as exc:
            set_override(store, "V1", "2024-01-20", "morning", status, author_id="ops-1")
        assert exc.value.field == "status"
        store.upsert_override.assert_not_called()

    @pytest.mark.parametrize("status", ["running", "stopped", "breakdown", "leave", " Leave "])
    def test_manual_statuses_accepted(self, status):
        store = MagicMock()
        set_override(store, "V1", "2024-01-20", "morning", status, now=NOW)
        store.upsert_override.assert_called_once()
        assert store.upsert_override.call_args[0][3] == status.strip().lower()

    def test_unparsable_date_rejected(self):
        store = MagicMock()
        with pytest.raises(ValidationError) as exc:
            set_override(store, "V1", "20-01-2024", "morning", "leave")
        assert exc.value.field == "date"
        store.upsert_override.assert_not_called()

    def test_blank_vehicle_rejected(self):
        store = MagicMock()
        with pytest.raises(ValidationError):
            set_override(store, "   ", "2024-01-20", "morning", "leave")
        store.upsert_override.assert_not_called()

    def test_shift_outside_configured_mode_rejected(self):
        store = MagicMock()
        with pytest.raises(ValidationError) as exc:
            set_override(store, "V1", "2024-01-20", "daily", "leave")
        assert exc.value.field == "shift"
        store.upsert_override.assert_not_called()


class TestOverrideWrite:
    def test_upsert_receives_clean_values(self):
        store = MagicMock()
        set_override(store, " V1 ", "2024-01-20", "Night", "breakdown",
                     notes="  clutch failure ", author_id="ops-1", now=NOW)

        args, kwargs = store.upsert_override.call_args
        assert args == ("V1", date(2024, 1, 20), "night", "breakdown", "clutch failure", "ops-1")
        assert kwargs["updated_at"] == NOW

    def test_blank_notes_stored_as_null(self):
        store = MagicMock()
        set_override(store, "V1", date(2024, 1, 20), "morning", "leave", notes="   ", now=NOW)
        assert store.upsert_override.call_args[0][4] is None

    def test_returns_saved_record(self):
        store = MagicMock()
        saved = set_override(store, "V1", "2024-01-20", "morning", "leave", now=NOW)
        assert saved is store.upsert_override.return_value

    def test_store_error_propagates_without_retry(self):
        store = MagicMock()
        store.upsert_override.side_effect = StoreError("connection lost")
        with pytest.raises(StoreError):
            set_override(store, "V1", "2024-01-20", "morning", "leave", now=NOW)
        assert store.upsert_override.call_count == 1


class TestDailyShiftMode:
    @pytest.fixture(autouse=True)
    def daily_mode(self, monkeypatch):
        monkeypatch.setattr(settings, "SHIFT_MODE", "daily")

    def test_daily_shift_reaches_store(self):
        store = MagicMock()
        set_override(store, "V1", "2024-01-20", "daily", "leave", now=NOW)
        args, _ = store.upsert_override.call_args
        assert args[:4] == ("V1", date(2024, 1, 20), "daily", "leave")

    @pytest.mark.parametrize("shift", ["morning", "night"])
    def test_split_shifts_rejected(self, shift):
        store = MagicMock()
        with pytest.raises(ValidationError) as exc:
            set_override(store, "V1", "2024-01-20", shift, "leave")
        assert exc.value.field == "shift"
        store.upsert_override.assert_not_called()
