"""
Map Launcher Deep Links Tests
"""

import re

import pytest

from maplauncher.exceptions import UnsupportedRepresentation
from maplauncher.models.schemas import (
    AddressDirections,
    CoordinateDirections,
    Coordinates,
    MapApp,
    TransportMode,
)
from maplauncher.registry import all_applications, describe
from maplauncher.utils.deep_links import build_directions_url, coordinate_fragment


INVALID = Coordinates(lat=-9999.99, lon=-9999.0)


@pytest.fixture
def directions():
    """Coordinate directions with both names set."""
    return CoordinateDirections(
        origin=Coordinates(lat=10.0, lon=10.0),
        destination=Coordinates(lat=20.0, lon=20.0),
        origin_name="FromName",
        destination_name="ToName",
    )


@pytest.fixture
def unnamed():
    """Coordinate directions without names."""
    return CoordinateDirections(
        origin=Coordinates(lat=10.0, lon=10.0),
        destination=Coordinates(lat=20.0, lon=20.0),
    )


@pytest.fixture
def addresses():
    return AddressDirections(origin="1 Infinite Loop", destination="Union Square")


def build(app, directions, mode=TransportMode.DRIVE, partner_id=""):
    return build_directions_url(directions, describe(app), mode, partner_id)


class TestCoordinateFragment:
    """Tests for the "lat,lon+(name)" fragment."""

    def test_with_name(self):
        fragment = coordinate_fragment(Coordinates(lat=10.0, lon=10.0), "TestName")
        assert fragment == "10.000000,10.000000+(TestName)"

    def test_invalid_location(self):
        """An invalid coordinate drops the whole fragment, name included."""
        assert coordinate_fragment(INVALID, "TestName") == ""

    def test_empty_name(self):
        assert coordinate_fragment(Coordinates(lat=10.0, lon=10.0), "") == "10.000000,10.000000"

    def test_name_is_encoded(self):
        fragment = coordinate_fragment(Coordinates(lat=10.0, lon=10.0), "Gare du Nord")
        assert fragment == "10.000000,10.000000+(Gare%20du%20Nord)"


class TestAppleLinks:
    """Tests for Apple Maps links."""

    def test_coordinates(self, directions):
        assert build(MapApp.APPLE, directions) == (
            "http://maps.apple.com/?saddr=10.000000,10.000000+(FromName)"
            "&daddr=20.000000,20.000000+(ToName)&z=14&dirflg=d"
        )

    def test_walk(self, unnamed):
        link = build(MapApp.APPLE, unnamed, TransportMode.WALK)
        assert link.endswith("&z=14&dirflg=w")

    def test_bike_has_no_flag(self, unnamed):
        link = build(MapApp.APPLE, unnamed, TransportMode.BIKE)
        assert "dirflg" not in link
        assert link.endswith("&z=14")

    def test_address(self, addresses):
        assert build(MapApp.APPLE, addresses) == (
            "http://maps.apple.com/?saddr=1+Infinite+Loop&daddr=Union+Square"
        )

    def test_invalid_origin_renders_empty(self):
        """The invalid endpoint's fragment is left empty."""
        link = build(
            MapApp.APPLE,
            CoordinateDirections(
                origin=INVALID,
                destination=Coordinates(lat=20.0, lon=20.0),
                origin_name="TestName",
                destination_name="ToName",
            ),
        )
        assert link == (
            "http://maps.apple.com/?saddr=&daddr=20.000000,20.000000+(ToName)&z=14&dirflg=d"
        )


class TestGoogleLinks:
    """Tests for Google Maps links."""

    def test_drive(self):
        link = build(
            MapApp.GOOGLE,
            CoordinateDirections(
                origin=Coordinates(lat=10.0, lon=10.0),
                destination=Coordinates(lat=20.0, lon=20.0),
                destination_name="ToName",
            ),
        )
        assert link == (
            "comgooglemaps://?saddr=10.000000,10.000000"
            "&daddr=20.000000,20.000000+(ToName)&directionsmode=driving"
        )

    def test_address_with_mode(self, addresses):
        link = build(MapApp.GOOGLE, addresses, TransportMode.RIDE)
        assert link == (
            "comgooglemaps://?saddr=1+Infinite+Loop&daddr=Union+Square&directionsmode=transit"
        )


class TestHereLinks:
    """Tests for HERE links."""

    def test_names_and_mode(self, directions):
        link = build(MapApp.HERE, directions, TransportMode.WALK)
        assert link == (
            "https://share.here.com/r/10.000000,10.000000,FromName"
            "/20.000000,20.000000,ToName?m=w"
        )

    def test_without_names(self, unnamed):
        link = build(MapApp.HERE, unnamed, TransportMode.RIDE)
        assert link == "https://share.here.com/r/10.000000,10.000000/20.000000,20.000000?m=pt"

    def test_address_unsupported(self, addresses):
        with pytest.raises(UnsupportedRepresentation):
            build(MapApp.HERE, addresses)


class TestYandexLinks:
    """Tests for Yandex Maps and Yandex Navigator links."""

    def test_maps_ride(self, unnamed):
        link = build(MapApp.YANDEX_MAPS, unnamed, TransportMode.RIDE)
        assert link == (
            "yandexmaps://maps.yandex.ru/?rtext=10.000000,10.000000~20.000000,20.000000&rtt=mt"
        )

    def test_maps_bike_has_no_mode(self, unnamed):
        """An unknown mode produces no transport parameter, not an error."""
        link = build(MapApp.YANDEX_MAPS, unnamed, TransportMode.BIKE)
        assert "rtt" not in link
        assert link.endswith("~20.000000,20.000000")

    def test_navi(self, directions):
        link = build(MapApp.YANDEX_NAVI, directions, TransportMode.WALK)
        assert link == (
            "yandexnavi://build_route_on_map?lat_to=20.000000&lon_to=20.000000"
            "&lat_from=10.000000&lon_from=10.000000"
        )


class TestCitymapperLinks:
    """Tests for Citymapper links."""

    def test_origin_without_name(self):
        link = build(
            MapApp.CITYMAPPER,
            CoordinateDirections(
                origin=Coordinates(lat=10.0, lon=10.0),
                destination=Coordinates(lat=20.0, lon=20.0),
                origin_name="",
                destination_name="Airport",
            ),
        )
        assert link == (
            "citymapper://directions?startcoord=10.000000,10.000000"
            "&endcoord=20.000000,20.000000&endname=Airport"
        )
        assert "startname" not in link

    def test_invalid_origin_is_dropped(self):
        """An invalid endpoint loses both its coordinate and its name."""
        link = build(
            MapApp.CITYMAPPER,
            CoordinateDirections(
                origin=INVALID,
                destination=Coordinates(lat=20.0, lon=20.0),
                origin_name="Home",
                destination_name="Work",
            ),
        )
        assert link == "citymapper://directions?endcoord=20.000000,20.000000&endname=Work"


class TestSingleEndpointLinks:
    """Tests for apps that only take a destination."""

    def test_navigon_default_name(self, unnamed):
        link = build(MapApp.NAVIGON, unnamed)
        assert link == "navigon://coordinate/Destination/20.000000/20.000000"

    def test_navigon_longitude_first(self):
        link = build(
            MapApp.NAVIGON,
            CoordinateDirections(
                origin=Coordinates(lat=0.0, lon=0.0),
                destination=Coordinates(lat=48.8809, lon=2.3553),
                destination_name="Gare du Nord",
            ),
        )
        assert link == "navigon://coordinate/Gare%20du%20Nord/2.355300/48.880900"

    def test_waze(self, directions):
        link = build(MapApp.WAZE, directions, TransportMode.WALK)
        assert link == "waze://?ll=20.000000,20.000000&navigate=yes"


class TestTransitAndMoovitLinks:
    """Tests for public transport apps."""

    def test_transit(self, directions):
        link = build(MapApp.TRANSIT, directions)
        assert link == "transit://directions?from=10.000000,10.000000&to=20.000000,20.000000"

    def test_transit_address_unsupported(self, addresses):
        with pytest.raises(UnsupportedRepresentation):
            build(MapApp.TRANSIT, addresses)

    def test_moovit(self, directions):
        link = build(MapApp.MOOVIT, directions, partner_id="Map Launcher")
        assert link == (
            "moovit://directions?dest_lat=20.000000&dest_lon=20.000000&dest_name=ToName"
            "&orig_lat=10.000000&orig_lon=10.000000&orig_name=FromName"
            "&auto_run=true&partner_id=Map%20Launcher"
        )

    def test_moovit_keeps_empty_names(self, unnamed):
        link = build(MapApp.MOOVIT, unnamed, partner_id="MapLauncher")
        assert "dest_name=&" in link
        assert "orig_name=&" in link


class TestAllApps:
    """Properties shared by every application."""

    @pytest.mark.parametrize("descriptor", all_applications(), ids=lambda d: d.key.value)
    @pytest.mark.parametrize(
        "origin, destination",
        [
            ((48.8566, 2.3522), (-33.8688, 151.2093)),
            ((0.1234567, -0.5), (89.9999999, -179.25)),
        ],
    )
    def test_six_decimal_coordinates(self, descriptor, origin, destination):
        """Every rendered coordinate has exactly six decimals."""
        link = build_directions_url(
            CoordinateDirections(
                origin=Coordinates(lat=origin[0], lon=origin[1]),
                destination=Coordinates(lat=destination[0], lon=destination[1]),
            ),
            descriptor,
            TransportMode.DRIVE,
            "MapLauncher",
        )
        decimals = re.findall(r"-?\d+\.(\d+)", link)
        assert decimals
        assert all(len(d) == 6 for d in decimals)

    @pytest.mark.parametrize("descriptor", all_applications(), ids=lambda d: d.key.value)
    def test_address_support_matches_flag(self, descriptor, addresses):
        if descriptor.supports_address_directions:
            assert build_directions_url(addresses, descriptor)
        else:
            with pytest.raises(UnsupportedRepresentation):
                build_directions_url(addresses, descriptor)
