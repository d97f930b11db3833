"""Derived runner values: current checkpoint, progress, pace, finish estimate."""

from __future__ import annotations

from typing import Optional, Sequence

from marathon_tracker.features.course.interpolation import interpolate_position
from marathon_tracker.features.course.models import Course
from marathon_tracker.shared.constants import CALCULATING, MARATHON_DISTANCE_KM
from marathon_tracker.shared.formatters import (
    format_clock_minutes,
    format_pace,
    parse_pace,
)
from marathon_tracker.shared.parsers import parse_clock_duration, parse_distance_km

from .models import CheckpointRecord, Derivation


def last_passed(checkpoints: Sequence[CheckpointRecord]) -> Optional[CheckpointRecord]:
    """Last passed checkpoint in race order."""
    for cp in reversed(checkpoints):
        if cp.passed:
            return cp
    return None


def progress_percentage(checkpoints: Sequence[CheckpointRecord]) -> Optional[float]:
    """Share of passed checkpoints, 0-100. None for an empty list."""
    if not checkpoints:
        return None
    passed = sum(1 for cp in checkpoints if cp.passed)
    return passed / len(checkpoints) * 100


def calculate_pace(checkpoints: Sequence[CheckpointRecord]) -> Optional[str]:
    """
    Pace between the two most recent passed checkpoints.

    Returns:
        M'SS"/km, or None if fewer than two usable checkpoints or the
        distance / time difference is not positive
    """
    timed = [cp for cp in checkpoints if cp.passed and cp.time]
    if len(timed) < 2:
        return None

    prev, last = timed[-2], timed[-1]
    prev_dist = parse_distance_km(prev.distance_label)
    last_dist = parse_distance_km(last.distance_label)
    prev_time = parse_clock_duration(prev.time)
    last_time = parse_clock_duration(last.time)

    if None in (prev_dist, last_dist, prev_time, last_time):
        return None

    dist_diff = last_dist - prev_dist
    time_diff = last_time - prev_time
    if dist_diff <= 0 or time_diff <= 0:
        return None

    return format_pace(time_diff / dist_diff)


def estimate_finish(
    pace: Optional[str],
    checkpoint: Optional[CheckpointRecord],
    finish_km: float = MARATHON_DISTANCE_KM,
) -> str:
    """
    Projected finish clock from the formatted pace.

    The pace is read back from its M'SS" string, so sub-second precision
    is lost and seconds are always rendered as :00.

    Returns:
        HH:MM:00, or CALCULATING when pace or the last split is unknown or
        the runner is already at the finish
    """
    if pace is None or checkpoint is None:
        return CALCULATING

    last_dist = parse_distance_km(checkpoint.distance_label)
    if last_dist is None or last_dist >= finish_km:
        return CALCULATING

    pace_min_km = parse_pace(pace)
    last_time = parse_clock_duration(checkpoint.time)
    if pace_min_km is None or last_time is None:
        return CALCULATING

    total_minutes = last_time + (finish_km - last_dist) * pace_min_km
    return format_clock_minutes(total_minutes)


def derive(checkpoints: Sequence[CheckpointRecord], course: Course) -> Derivation:
    """Compute all derived values for a checkpoint list."""
    last = last_passed(checkpoints)
    last_km = parse_distance_km(last.distance_label) if last else None
    pace = calculate_pace(checkpoints)

    return Derivation(
        current_checkpoint=last.name if last else None,
        progress_percentage=progress_percentage(checkpoints),
        pace=pace,
        estimated_finish=estimate_finish(pace, last, course.finish_km),
        last_passed=last,
        last_passed_km=last_km,
        position=(
            interpolate_position(course.checkpoints, last_km)
            if last_km is not None else None
        ),
    )
