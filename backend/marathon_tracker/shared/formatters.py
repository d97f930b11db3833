"""
Formatting utilities for display.

Pace strings are also parsed back (see parse_pace): the finish estimate
is computed from the formatted pace, so both directions must stay in sync.
"""
import math
import re
from typing import Optional

_PACE_RE = re.compile(r"(\d+)'(\d+)\"")


def format_pace(pace_min_km: float) -> str:
    """
    Format pace as M'SS"/km.

    Args:
        pace_min_km: Pace in minutes per km (e.g. 6.0)

    Returns:
        Formatted string (e.g. '6\\'00"/km'), seconds are floored
    """
    minutes = math.floor(pace_min_km)
    seconds = math.floor((pace_min_km - minutes) * 60)

    return f"{minutes}'{seconds:02d}\"/km"


def parse_pace(text: Optional[str]) -> Optional[float]:
    """Parse M'SS" back to minutes per km. None if the pattern is absent."""
    if not text:
        return None
    match = _PACE_RE.search(text)
    if not match:
        return None
    return int(match.group(1)) + int(match.group(2)) / 60


def format_clock_minutes(total_minutes: float) -> str:
    """
    Format minutes as HH:MM:00.

    Seconds are always rendered as 00.
    """
    hours = math.floor(total_minutes / 60)
    minutes = math.floor(total_minutes % 60)

    return f"{hours:02d}:{minutes:02d}:00"
