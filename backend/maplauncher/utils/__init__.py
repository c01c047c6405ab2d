"""Map Launcher Utilities"""

from maplauncher.utils.geo import format_lat_lon, is_valid_coordinate
from maplauncher.utils.deep_links import build_directions_url
from maplauncher.utils.query import QueryBuilder, is_well_formed_uri

__all__ = [
    "format_lat_lon",
    "is_valid_coordinate",
    "build_directions_url",
    "QueryBuilder",
    "is_well_formed_uri",
]
