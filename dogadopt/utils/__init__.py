"""Utility modules for dogadopt."""

from .api_clients import SupabaseClient, QueryBuilder, QueryResponse, PostgrestError
from .host import HostEnvironment, GeolocationCapability, FixedPositionGeolocation
from .helpers import map_dog_row, parse_dog_rows, parse_rescue_rows

__all__ = [
    "SupabaseClient",
    "QueryBuilder",
    "QueryResponse",
    "PostgrestError",
    "HostEnvironment",
    "GeolocationCapability",
    "FixedPositionGeolocation",
    "map_dog_row",
    "parse_dog_rows",
    "parse_rescue_rows",
]
