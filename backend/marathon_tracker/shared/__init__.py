"""
Shared utilities (NOT business logic).

Usage:
    from marathon_tracker.shared import parse_clock_duration, format_pace
    from marathon_tracker.shared.constants import ErrorKind
"""
from .geo import (
    haversine,
    cumulative_distances,
    lerp_point,
    EARTH_RADIUS_KM,
)
from .parsers import (
    parse_distance_km,
    parse_clock_duration,
    is_clock_time,
)
from .formatters import (
    format_pace,
    parse_pace,
    format_clock_minutes,
)
from .constants import (
    ErrorKind,
    ERROR_KIND_TO_STATUS,
    MARATHON_DISTANCE_KM,
    HALF_MARATHON_DISTANCE_KM,
    CALCULATING,
    NO_ELAPSED_RECORD,
    DEFAULT_CATEGORY,
    runner_placeholder_name,
)

__all__ = [
    # geo
    "haversine",
    "cumulative_distances",
    "lerp_point",
    "EARTH_RADIUS_KM",
    # parsers
    "parse_distance_km",
    "parse_clock_duration",
    "is_clock_time",
    # formatters
    "format_pace",
    "parse_pace",
    "format_clock_minutes",
    # constants
    "ErrorKind",
    "ERROR_KIND_TO_STATUS",
    "MARATHON_DISTANCE_KM",
    "HALF_MARATHON_DISTANCE_KM",
    "CALCULATING",
    "NO_ELAPSED_RECORD",
    "DEFAULT_CATEGORY",
    "runner_placeholder_name",
]
