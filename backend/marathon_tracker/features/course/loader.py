"""Course loader — built-in course, or a YAML / GPX course file.

YAML layout:

    name: Seoul Marathon
    checkpoints:
      - {name: Start, distance: 0km, distance_km: 0, lat: 37.5683, lng: 126.8970}
      - ...
    path:
      - [37.5683, 126.8970]

GPX: the first track (or route) becomes the path, named waypoints become
checkpoints placed at the nearest track point.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import gpxpy
import gpxpy.gpx
import yaml

from marathon_tracker.shared.constants import MARATHON_DISTANCE_KM
from marathon_tracker.shared.geo import cumulative_distances, haversine

from .interpolation import validate_course
from .models import Course, CourseCheckpoint, Position
from .seoul import SEOUL_COURSE

logger = logging.getLogger(__name__)

# Module-level singleton, loaded once per process
_course: Optional[Course] = None


def get_course() -> Course:
    """Get the configured course (built-in Seoul course if none configured)."""
    global _course
    if _course is not None:
        return _course

    from marathon_tracker.config import settings

    if settings.course_file:
        path = resolve_course_path(settings.course_file)
        _course = load_course(path)
        logger.info(
            f"Course loaded from {path}: {_course.name}, "
            f"{len(_course.checkpoints)} checkpoints"
        )
    else:
        _course = SEOUL_COURSE
    return _course


def resolve_course_path(path: str | Path) -> Path:
    """Course file path; bare names are looked up in content/courses/."""
    path = Path(path)
    if path.is_absolute() or path.exists():
        return path
    from marathon_tracker.config import CONTENT_DIR

    candidate = CONTENT_DIR / "courses" / path
    return candidate if candidate.exists() else path


def load_course(path: str | Path, finish_km: float = MARATHON_DISTANCE_KM) -> Course:
    """Load a course file, format chosen by extension."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return load_course_yaml(path)
    if suffix == ".gpx":
        return load_course_gpx(path, finish_km=finish_km)
    raise ValueError(f"Unsupported course file: {path.name}")


def load_course_yaml(path: str | Path) -> Course:
    """Load course from YAML."""
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    checkpoints = tuple(
        CourseCheckpoint(
            name=str(cp["name"]),
            distance_label=str(cp.get("distance") or f"{cp['distance_km']}km"),
            distance_km=float(cp["distance_km"]),
            lat=float(cp["lat"]),
            lng=float(cp["lng"]),
        )
        for cp in data.get("checkpoints", [])
    )
    validate_course(checkpoints)

    path_points = tuple(
        Position(lat=float(lat), lng=float(lng)) for lat, lng in data.get("path", [])
    )
    return Course(
        name=data.get("name", path.stem),
        checkpoints=checkpoints,
        path=path_points,
    )


def load_course_gpx(
    path: str | Path, finish_km: float = MARATHON_DISTANCE_KM
) -> Course:
    """
    Build a course from a GPX track with named waypoints.

    Measured track length is scaled to finish_km, so km-marks of the
    waypoints match the official distance.

    Raises:
        ValueError: If GPX is invalid or has no track points
    """
    path = Path(path)
    try:
        gpx = gpxpy.parse(path.read_text(encoding="utf-8"))
    except Exception as e:
        logger.error(f"Failed to parse GPX: {e}")
        raise ValueError(f"Invalid GPX file: {e}")

    points: list[tuple[float, float]] = []
    for track in gpx.tracks:
        for segment in track.segments:
            for point in segment.points:
                points.append((point.latitude, point.longitude))

    if not points:
        for route in gpx.routes:
            for point in route.points:
                points.append((point.latitude, point.longitude))

    if len(points) < 2:
        raise ValueError("GPX file contains no track or route points")

    totals = cumulative_distances(points)
    measured_km = totals[-1]
    if measured_km <= 0:
        raise ValueError("GPX track has zero length")
    scale = finish_km / measured_km

    placed: dict[int, str] = {}
    for waypoint in gpx.waypoints:
        idx = _nearest_index(points, waypoint.latitude, waypoint.longitude)
        placed.setdefault(idx, waypoint.name or f"WP{len(placed) + 1}")

    placed.setdefault(0, "Start")
    placed.setdefault(len(points) - 1, "Finish")

    checkpoints = []
    for idx in sorted(placed):
        km = round(totals[idx] * scale, 3)
        if idx == 0:
            label = "0km"
        elif idx == len(points) - 1:
            km = finish_km
            label = f"{finish_km}km"
        else:
            label = f"~{round(km)}km"
        lat, lng = points[idx]
        checkpoints.append(CourseCheckpoint(placed[idx], label, km, lat, lng))

    validate_course(checkpoints)
    return Course(
        name=gpx.name or path.stem,
        checkpoints=tuple(checkpoints),
        path=tuple(Position(lat, lng) for lat, lng in points),
    )


def _nearest_index(points: list[tuple[float, float]], lat: float, lng: float) -> int:
    """Index of the track point closest to (lat, lng)."""
    return min(
        range(len(points)),
        key=lambda i: haversine(points[i][0], points[i][1], lat, lng),
    )
