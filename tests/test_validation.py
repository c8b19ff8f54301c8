"""Tests for ship validation rules."""

from datetime import datetime

import pytest

from shipregistry.core.config import settings
from shipregistry.schemas.ship import ShipBase
from shipregistry.services.ship_service import is_valid_id, is_valid_ship, validate_ship


class TestValidateShip:
    def test_valid_ship(self, make_ship):
        assert validate_ship(make_ship()) is None
        assert is_valid_ship(make_ship())

    def test_missing_ship(self):
        assert not is_valid_ship(None)

    @pytest.mark.parametrize("speed, valid", [
        (0.01, True), (0.99, True), (0.5, True),
        (0.009, False), (1.0, False), (0.0, False), (None, False),
    ])
    def test_speed_bounds(self, make_ship, speed, valid):
        assert is_valid_ship(make_ship(speed=speed)) is valid

    @pytest.mark.parametrize("crew_size, valid", [
        (1, True), (9999, True),
        (0, False), (10000, False), (-5, False), (None, False),
    ])
    def test_crew_size_bounds(self, make_ship, crew_size, valid):
        assert is_valid_ship(make_ship(crew_size=crew_size)) is valid

    @pytest.mark.parametrize("prod_date, valid", [
        (datetime(2800, 1, 1), True),
        (datetime(3019, 12, 31, 23, 59, 59), True),
        (datetime(2799, 12, 31, 23, 59, 59), False),
        (datetime(3020, 1, 1), False),
        (None, False),
    ])
    def test_year_bounds(self, make_ship, prod_date, valid):
        assert is_valid_ship(make_ship(prod_date=prod_date)) is valid

    def test_negative_timestamp_rejected(self, make_ship):
        reason = validate_ship(make_ship(prod_date=datetime(1969, 12, 31)))
        assert reason == "prodDate must be a non-negative timestamp"

    @pytest.mark.parametrize("field", ["name", "planet"])
    @pytest.mark.parametrize("value, valid", [
        ("x", True), ("x" * 50, True), ("  ", True),
        ("", False), ("x" * 51, False), (None, False),
    ])
    def test_text_fields(self, make_ship, field, value, valid):
        assert is_valid_ship(make_ship(**{field: value})) is valid

    def test_ship_type_is_optional(self, make_ship):
        assert is_valid_ship(make_ship(ship_type=None))

    def test_first_broken_rule_is_reported(self):
        reason = validate_ship(ShipBase(name="", planet="", speed=5.0))
        assert reason.startswith("name")

    def test_year_read_in_configured_timezone(self, make_ship, monkeypatch):
        # 20:00 UTC on Dec 31 3019 is already 3020 in Tokyo
        late = make_ship(prod_date=datetime(3019, 12, 31, 20, 0))
        assert is_valid_ship(late)

        monkeypatch.setattr(settings, "SHIP_TIMEZONE", "Asia/Tokyo")
        assert not is_valid_ship(late)


class TestIsValidId:
    @pytest.mark.parametrize("ship_id, valid", [
        (1, True), (123456789, True), (2**63 - 1, True),
        (0, False), (-1, False), (None, False), (True, False), ("1", False), (2**63, False),
    ])
    def test_ids(self, ship_id, valid):
        assert is_valid_id(ship_id) is valid
