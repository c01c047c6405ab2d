"""
Map Launcher Geo Utilities
Coordinate validity checks and textual rendering
"""

from maplauncher.models.schemas import Coordinates


def is_valid_coordinate(coord: Coordinates) -> bool:
    """
    Check that a coordinate lies on the globe.

    Args:
        coord: Coordinate to check

    Returns:
        True if latitude is within [-90, 90] and longitude within [-180, 180]
    """
    return -90 <= coord.lat <= 90 and -180 <= coord.lon <= 180


def format_degrees(value: float) -> str:
    """Render a latitude or longitude with exactly six decimals."""
    return f"{value:.6f}"


def lat_lon_parts(coord: Coordinates) -> tuple[str, str]:
    """
    Rendered (latitude, longitude) pair.
    Both parts are empty strings for an invalid coordinate.
    """
    if not is_valid_coordinate(coord):
        return "", ""
    return format_degrees(coord.lat), format_degrees(coord.lon)


def format_lat_lon(coord: Coordinates) -> str:
    """Render as "lat,lon", or an empty string for an invalid coordinate."""
    if not is_valid_coordinate(coord):
        return ""
    lat, lon = lat_lon_parts(coord)
    return f"{lat},{lon}"
