# tests/test_config.py
"""Settings are validated when they load."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from pydantic import ValidationError
from app.config import Settings


def load(**overrides):
    return Settings(_env_file=None, **overrides)


class TestShiftMode:
    @pytest.mark.parametrize("mode", ["split", "daily"])
    def test_known_modes_load(self, mode):
        assert load(SHIFT_MODE=mode).SHIFT_MODE == mode

    @pytest.mark.parametrize("mode", ["Split", "weekly", ""])
    def test_unknown_mode_fails_at_load(self, mode):
        with pytest.raises(ValidationError):
            load(SHIFT_MODE=mode)


class TestTimezone:
    def test_default_is_business_timezone(self):
        assert load().TIMEZONE == "Asia/Kolkata"

    def test_known_timezone_loads(self):
        assert load(TIMEZONE="Europe/Berlin").TIMEZONE == "Europe/Berlin"

    @pytest.mark.parametrize("tz", ["Asia/Nowhere", "not a zone", ""])
    def test_unknown_timezone_fails_at_load(self, tz):
        with pytest.raises(ValidationError):
            load(TIMEZONE=tz)
