"""
Field parsers for race-result strings.

Pure and total: every function returns None for input it cannot read
and never raises.
"""
import re
from typing import Optional

_DISTANCE_RE = re.compile(r"(\d+(?:\.\d+)?)\s*km", re.IGNORECASE)
# H:MM:SS, optional fraction of a second (ignored)
_CLOCK_RE = re.compile(r"(\d+):(\d+):(\d+)(?:\.\d+)?")


def parse_distance_km(label: Optional[str]) -> Optional[float]:
    """
    Extract the number preceding a "km" marker.

    Examples:
        "21.0975km" -> 21.0975
        "~12 KM"    -> 12.0
        "km"        -> None
    """
    if not label:
        return None
    match = _DISTANCE_RE.search(label)
    if not match:
        return None
    return float(match.group(1))


def parse_clock_duration(text: Optional[str]) -> Optional[float]:
    """
    Parse "H:MM:SS" (or "H:MM:SS.ff") into minutes.

    Args:
        text: Clock string from a result page (e.g. "01:02:03")

    Returns:
        hours*60 + minutes + seconds/60, or None for "", "-" and
        malformed input
    """
    if not text:
        return None
    text = text.strip()
    if not text or text == "-":
        return None

    match = _CLOCK_RE.fullmatch(text)
    if not match:
        return None

    hours, minutes, seconds = (int(g) for g in match.groups())
    return hours * 60 + minutes + seconds / 60


def is_clock_time(text: Optional[str]) -> bool:
    """True if a cell holds a recorded time that parse_clock_duration can read."""
    return parse_clock_duration(text) is not None
