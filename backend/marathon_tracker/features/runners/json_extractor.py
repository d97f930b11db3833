"""Parser for the upstream player JSON feed.

Payload shape (loosely typed, every field optional):

    {
        "num": "1234", "name": "홍길동", "course_cd": "Full",
        "course": {"name": "Full", "distance": "42.195", "path": [{"lat": .., "lng": ..}]},
        "records": [
            {"point": {"name": "5K", "distance": "5.00", "lat": .., "lng": ..},
             "time_point": "00:25:10"}
        ],
        "pace_nettime": "5'02\\"/km", "result_nettime": "03:32:00"
    }
"""

from __future__ import annotations

import re
from typing import Any, Optional

from marathon_tracker.features.course.models import Position
from marathon_tracker.shared.constants import DEFAULT_CATEGORY

from .errors import ParseError
from .models import CheckpointRecord, Extraction

LEADING_NUMBER_RE = re.compile(r"\s*(\d+(?:\.\d+)?)")


def _as_float(value: Any) -> float:
    """Leading number of a distance ("10.00", "10km", 10), 0 if there is none."""
    if _is_number(value):
        return float(value)
    match = LEADING_NUMBER_RE.match(str(value)) if value is not None else None
    return float(match.group(1)) if match else 0.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_text(value: Any) -> Optional[str]:
    """String form of a loosely typed scalar, None for missing or empty."""
    if value is None or value == "" or isinstance(value, (dict, list)):
        return None
    return str(value)


def _point(record: Any) -> dict:
    if isinstance(record, dict) and isinstance(record.get("point"), dict):
        return record["point"]
    return {}


def distance_label(distance: Any, fallback: Optional[str]) -> Optional[str]:
    """Label for a point distance: "5.00" -> "5km", missing -> fallback."""
    if not distance:
        return fallback
    label = str(distance).strip()
    if not label.lower().endswith("km"):
        label = f"{label}km"
    return label.replace(".00km", "km")


def sort_records(records: list) -> list:
    """Records ascending by point distance (missing distance counts as 0)."""
    return sorted(records, key=lambda r: _as_float(_point(r).get("distance")))


def find_position(records: list, course: Any) -> Optional[Position]:
    """Last record point carrying coordinates, else end of the course path."""
    for record in reversed(records):
        point = _point(record)
        if _is_number(point.get("lat")) and _is_number(point.get("lng")):
            return Position(lat=float(point["lat"]), lng=float(point["lng"]))

    path = course.get("path") if isinstance(course, dict) else None
    if isinstance(path, list) and path:
        last = path[-1]
        if isinstance(last, dict) and last.get("lat") and last.get("lng"):
            try:
                return Position(lat=float(last["lat"]), lng=float(last["lng"]))
            except (TypeError, ValueError):
                return None
    return None


def parse_player_payload(data: Any, query: str) -> Extraction:
    """
    Convert the upstream player payload.

    Args:
        data: Decoded JSON body
        query: Bib or name the lookup was made with

    Returns:
        Extraction with checkpoints sorted by distance

    Raises:
        ParseError: Payload is not a JSON object
    """
    if not isinstance(data, dict):
        raise ParseError()

    records = data.get("records")
    records = sort_records(records) if isinstance(records, list) else []

    checkpoints = []
    for record in records:
        point = _point(record)
        name = point.get("name")
        if not name:
            continue
        time_point = record.get("time_point")
        checkpoints.append(
            CheckpointRecord(
                name=str(name),
                distance_label=distance_label(point.get("distance"), str(name)),
                time=str(time_point) if time_point else None,
                passed=bool(time_point),
            )
        )

    course = data.get("course") if isinstance(data.get("course"), dict) else {}
    total_distance = distance_label(course.get("distance"), None)

    return Extraction(
        bib_number=str(data.get("num") or data.get("tag") or query),
        name=str(data.get("name") or ""),
        category=str(data.get("course_cd") or course.get("name") or DEFAULT_CATEGORY),
        checkpoints=tuple(checkpoints),
        position=find_position(records, course),
        total_distance=total_distance,
        pace=_as_text(data.get("pace_nettime")),
        estimated_finish=_as_text(data.get("result_nettime")),
    )
