"""
Map Launcher Deep Links
Navigation app deep link generation
"""

from typing import Callable, Optional, Union

from maplauncher.exceptions import UnsupportedRepresentation
from maplauncher.models.schemas import (
    AddressDirections,
    CoordinateDirections,
    Coordinates,
    MapApp,
    MapApplicationDescriptor,
    RepresentationKind,
    TransportMode,
)
from maplauncher.utils.geo import format_lat_lon, is_valid_coordinate, lat_lon_parts
from maplauncher.utils.query import (
    QueryBuilder,
    encode_address,
    encode_path_segment,
    encode_query_value,
)

Directions = Union[CoordinateDirections, AddressDirections]
LinkRule = Callable[[Directions, MapApplicationDescriptor, TransportMode, str], str]

APPLE_MAPS_URL = "http://maps.apple.com/"
HERE_SHARE_URL = "https://share.here.com/r/"
NAVIGON_DEFAULT_NAME = "Destination"


def coordinate_fragment(coord: Coordinates, name: Optional[str] = None) -> str:
    """
    Render a coordinate as "lat,lon+(name)" for Apple and Google Maps.

    Args:
        coord: Endpoint coordinate
        name: Optional display name, omitted when empty

    Returns:
        The fragment, or an empty string if the coordinate is invalid
    """
    lat_lon = format_lat_lon(coord)
    if not lat_lon:
        return ""
    if name:
        return f"{lat_lon}+({encode_query_value(name)})"
    return lat_lon


def _add_transport(
    query: QueryBuilder,
    descriptor: MapApplicationDescriptor,
    mode: TransportMode,
) -> QueryBuilder:
    return query.add(
        descriptor.transport_mode_key,
        descriptor.transport_mode_parameters.get(mode),
    )


def _apple_link(directions, descriptor, mode, partner_id):
    query = QueryBuilder()
    if isinstance(directions, AddressDirections):
        query.add("saddr", encode_address(directions.origin), keep_empty=True)
        query.add("daddr", encode_address(directions.destination), keep_empty=True)
        return f"{APPLE_MAPS_URL}?{query}"

    query.add("saddr", coordinate_fragment(directions.origin, directions.origin_name), keep_empty=True)
    query.add("daddr", coordinate_fragment(directions.destination, directions.destination_name), keep_empty=True)
    query.add("z", "14")
    _add_transport(query, descriptor, mode)
    return f"{APPLE_MAPS_URL}?{query}"


def _google_link(directions, descriptor, mode, partner_id):
    query = QueryBuilder()
    if isinstance(directions, AddressDirections):
        query.add("saddr", encode_address(directions.origin), keep_empty=True)
        query.add("daddr", encode_address(directions.destination), keep_empty=True)
    else:
        query.add("saddr", coordinate_fragment(directions.origin, directions.origin_name), keep_empty=True)
        query.add("daddr", coordinate_fragment(directions.destination, directions.destination_name), keep_empty=True)
    _add_transport(query, descriptor, mode)
    return f"{descriptor.uri_scheme_prefix}?{query}"


def _here_endpoint(coord: Coordinates, name: Optional[str]) -> str:
    lat_lon = format_lat_lon(coord)
    if lat_lon and name:
        return f"{lat_lon},{encode_path_segment(name)}"
    return lat_lon


def _here_link(directions, descriptor, mode, partner_id):
    # HERE's share links open in the app when installed and fall back to the web
    url = (
        f"{HERE_SHARE_URL}"
        f"{_here_endpoint(directions.origin, directions.origin_name)}/"
        f"{_here_endpoint(directions.destination, directions.destination_name)}"
    )
    query = _add_transport(QueryBuilder(), descriptor, mode)
    return f"{url}?{query}" if query else url


def _yandex_maps_link(directions, descriptor, mode, partner_id):
    route = f"{format_lat_lon(directions.origin)}~{format_lat_lon(directions.destination)}"
    query = QueryBuilder().add("rtext", route)
    _add_transport(query, descriptor, mode)
    return f"{descriptor.uri_scheme_prefix}maps.yandex.ru/?{query}"


def _yandex_navi_link(directions, descriptor, mode, partner_id):
    lat_to, lon_to = lat_lon_parts(directions.destination)
    lat_from, lon_from = lat_lon_parts(directions.origin)
    query = (
        QueryBuilder()
        .add("lat_to", lat_to, keep_empty=True)
        .add("lon_to", lon_to, keep_empty=True)
        .add("lat_from", lat_from, keep_empty=True)
        .add("lon_from", lon_from, keep_empty=True)
    )
    return f"{descriptor.uri_scheme_prefix}build_route_on_map?{query}"


def _citymapper_link(directions, descriptor, mode, partner_id):
    start_valid = is_valid_coordinate(directions.origin)
    end_valid = is_valid_coordinate(directions.destination)
    query = (
        QueryBuilder()
        .add("startcoord", format_lat_lon(directions.origin), when=start_valid)
        .add("startname", encode_query_value(directions.origin_name or ""), when=start_valid)
        .add("endcoord", format_lat_lon(directions.destination), when=end_valid)
        .add("endname", encode_query_value(directions.destination_name or ""), when=end_valid)
    )
    return f"{descriptor.uri_scheme_prefix}directions?{query}"


def _navigon_link(directions, descriptor, mode, partner_id):
    # Single-endpoint scheme, longitude first
    name = directions.destination_name or NAVIGON_DEFAULT_NAME
    lat, lon = lat_lon_parts(directions.destination)
    return f"{descriptor.uri_scheme_prefix}coordinate/{encode_path_segment(name)}/{lon}/{lat}"


def _transit_link(directions, descriptor, mode, partner_id):
    query = (
        QueryBuilder()
        .add("from", format_lat_lon(directions.origin), keep_empty=True)
        .add("to", format_lat_lon(directions.destination), keep_empty=True)
    )
    return f"{descriptor.uri_scheme_prefix}directions?{query}"


def _waze_link(directions, descriptor, mode, partner_id):
    query = (
        QueryBuilder()
        .add("ll", format_lat_lon(directions.destination), keep_empty=True)
        .add("navigate", "yes")
    )
    return f"{descriptor.uri_scheme_prefix}?{query}"


def _moovit_link(directions, descriptor, mode, partner_id):
    dest_lat, dest_lon = lat_lon_parts(directions.destination)
    orig_lat, orig_lon = lat_lon_parts(directions.origin)
    query = (
        QueryBuilder()
        .add("dest_lat", dest_lat, keep_empty=True)
        .add("dest_lon", dest_lon, keep_empty=True)
        .add("dest_name", encode_query_value(directions.destination_name or ""), keep_empty=True)
        .add("orig_lat", orig_lat, keep_empty=True)
        .add("orig_lon", orig_lon, keep_empty=True)
        .add("orig_name", encode_query_value(directions.origin_name or ""), keep_empty=True)
        .add("auto_run", "true")
        .add("partner_id", encode_query_value(partner_id), keep_empty=True)
    )
    return f"{descriptor.uri_scheme_prefix}directions?{query}"


_LINK_RULES: dict[MapApp, LinkRule] = {
    MapApp.APPLE: _apple_link,
    MapApp.HERE: _here_link,
    MapApp.GOOGLE: _google_link,
    MapApp.YANDEX_NAVI: _yandex_navi_link,
    MapApp.YANDEX_MAPS: _yandex_maps_link,
    MapApp.CITYMAPPER: _citymapper_link,
    MapApp.NAVIGON: _navigon_link,
    MapApp.TRANSIT: _transit_link,
    MapApp.WAZE: _waze_link,
    MapApp.MOOVIT: _moovit_link,
}


def build_directions_url(
    directions: Directions,
    descriptor: MapApplicationDescriptor,
    mode: TransportMode = TransportMode.DRIVE,
    partner_id: str = "",
) -> str:
    """
    Generate the deep link for one application.

    Args:
        directions: Resolved coordinate or address directions
        descriptor: Target application
        mode: Requested transport mode; ignored when the app has no code for it
        partner_id: Host application identifier (used by Moovit only)

    Returns:
        Deep link URL string

    Raises:
        UnsupportedRepresentation: If the app does not accept this kind of directions
    """
    kind = RepresentationKind(directions.kind)
    if not descriptor.supports(kind):
        raise UnsupportedRepresentation(
            f"{descriptor.display_name} does not accept {kind.value} directions"
        )
    return _LINK_RULES[descriptor.key](directions, descriptor, mode, partner_id)
