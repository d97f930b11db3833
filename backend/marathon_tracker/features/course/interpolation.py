"""Runner position from distance covered, by interpolating along the course."""

from __future__ import annotations

from typing import Sequence

from marathon_tracker.shared.geo import lerp_point

from .models import CourseCheckpoint, Position


def validate_course(checkpoints: Sequence[CourseCheckpoint]) -> None:
    """Raise ValueError unless checkpoints start at 0 km and strictly increase."""
    if not checkpoints:
        raise ValueError("Course has no checkpoints")
    if checkpoints[0].distance_km != 0:
        raise ValueError(
            f"Course must start at 0 km, got {checkpoints[0].distance_km}"
        )
    for prev, cur in zip(checkpoints, checkpoints[1:]):
        if cur.distance_km <= prev.distance_km:
            raise ValueError(
                f"Checkpoint distances must strictly increase: "
                f"{prev.name} ({prev.distance_km}) -> {cur.name} ({cur.distance_km})"
            )


def interpolate_position(
    checkpoints: Sequence[CourseCheckpoint], distance_km: float
) -> Position:
    """Interpolate lat/lng for a distance along the course.

    Finds the segment (current, next) with
    current.distance_km <= distance_km <= next.distance_km and moves
    linearly between its endpoints. Distances past the finish clamp to the
    last checkpoint, distances before the start clamp to the first one.
    A zero-length segment resolves to its first endpoint.
    """
    if not checkpoints:
        raise ValueError("Course has no checkpoints")

    # Exact km-marks return the checkpoint itself, no float drift
    for cp in checkpoints:
        if cp.distance_km == distance_km:
            return cp.position

    if distance_km < checkpoints[0].distance_km:
        return checkpoints[0].position

    for current, nxt in zip(checkpoints, checkpoints[1:]):
        if current.distance_km <= distance_km <= nxt.distance_km:
            span = nxt.distance_km - current.distance_km
            t = (distance_km - current.distance_km) / span if span > 0 else 0.0
            lat, lng = lerp_point((current.lat, current.lng), (nxt.lat, nxt.lng), t)
            return Position(lat=lat, lng=lng)

    return checkpoints[-1].position
