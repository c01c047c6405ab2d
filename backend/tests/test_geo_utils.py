"""
Map Launcher Geo Utilities Tests
"""

import pytest

from maplauncher.models.schemas import Coordinates
from maplauncher.utils.geo import (
    format_degrees,
    format_lat_lon,
    is_valid_coordinate,
    lat_lon_parts,
)


class TestIsValidCoordinate:
    """Tests for coordinate validity."""

    @pytest.mark.parametrize(
        "lat, lon",
        [(0, 0), (90, 180), (-90, -180), (48.8566, 2.3522)],
    )
    def test_valid(self, lat, lon):
        assert is_valid_coordinate(Coordinates(lat=lat, lon=lon))

    @pytest.mark.parametrize(
        "lat, lon",
        [(-9999.99, -9999.0), (90.0001, 0), (0, 180.5), (float("nan"), 0)],
    )
    def test_invalid(self, lat, lon):
        assert not is_valid_coordinate(Coordinates(lat=lat, lon=lon))


class TestFormatting:
    """Tests for coordinate rendering."""

    def test_six_decimals(self):
        assert format_degrees(10.0) == "10.000000"
        assert format_degrees(-33.8688) == "-33.868800"
        assert format_degrees(2.35221999) == "2.352220"

    def test_lat_lon(self):
        assert format_lat_lon(Coordinates(lat=10.0, lon=20.5)) == "10.000000,20.500000"

    def test_invalid_renders_empty(self):
        """Invalid coordinates render as empty components."""
        coord = Coordinates(lat=-9999.99, lon=-9999.0)
        assert format_lat_lon(coord) == ""
        assert lat_lon_parts(coord) == ("", "")
