"""
Tests for derived runner values: pace, finish estimate, progress, position.
"""

import pytest

from marathon_tracker.features.course import SEOUL_COURSE, Position
from marathon_tracker.features.runners.derivation import (
    calculate_pace,
    derive,
    estimate_finish,
    last_passed,
    progress_percentage,
)
from marathon_tracker.features.runners.models import CheckpointRecord
from marathon_tracker.shared.constants import CALCULATING


def cp(name, distance, time=None):
    """Checkpoint shorthand, passed when a time is given."""
    return CheckpointRecord(name=name, distance_label=distance, time=time, passed=time is not None)


# =============================================================================
# Test Pace
# =============================================================================

class TestCalculatePace:
    """Tests for calculate_pace function."""

    def test_last_two_checkpoints(self):
        """5 km in 30 minutes = 6'00"/km."""
        checkpoints = [cp("5K", "5km", "08:30:00"), cp("10K", "10km", "09:00:00")]
        assert calculate_pace(checkpoints) == "6'00\"/km"

    def test_uses_most_recent_pair(self):
        checkpoints = [
            cp("출발", "0km", "0:00:00"),
            cp("5K", "5km", "0:30:00"),
            cp("10K", "10km", "0:55:00"),
            cp("15K", "15km"),
        ]
        assert calculate_pace(checkpoints) == "5'00\"/km"

    def test_start_at_zero_counts(self):
        """0 km / 0:00:00 are valid values, not missing ones."""
        checkpoints = [cp("출발", "0km", "0:00:00"), cp("5K", "5km", "0:25:00")]
        assert calculate_pace(checkpoints) == "5'00\"/km"

    def test_fractional_seconds(self):
        """Hundredths on the cumulative time do not block the pace."""
        checkpoints = [cp("5K", "5km", "0:25:00.48"), cp("10K", "10km", "0:50:00.12")]
        assert calculate_pace(checkpoints) == "5'00\"/km"

    def test_fewer_than_two(self):
        assert calculate_pace([cp("5K", "5km", "0:25:00"), cp("10K", "10km")]) is None
        assert calculate_pace([]) is None

    def test_unparseable_distance(self):
        checkpoints = [cp("5K", "5K", "0:25:00"), cp("10K", "10km", "0:50:00")]
        assert calculate_pace(checkpoints) is None

    def test_non_positive_differences(self):
        same_distance = [cp("A", "5km", "0:25:00"), cp("B", "5km", "0:30:00")]
        same_time = [cp("A", "5km", "0:25:00"), cp("B", "10km", "0:25:00")]
        assert calculate_pace(same_distance) is None
        assert calculate_pace(same_time) is None


# =============================================================================
# Test Finish Estimate
# =============================================================================

class TestEstimateFinish:
    """Tests for estimate_finish function."""

    def test_projection(self):
        """50 min at 10 km + 32.195 km at 5'00" = 210.975 min."""
        assert estimate_finish("5'00\"/km", cp("10K", "10km", "0:50:00")) == "03:30:00"

    def test_seconds_always_zero(self):
        result = estimate_finish("5'17\"/km", cp("하프", "21.0975km", "1:51:23"))
        assert result.endswith(":00")

    def test_no_pace(self):
        assert estimate_finish(None, cp("10K", "10km", "0:50:00")) == CALCULATING

    def test_no_checkpoint(self):
        assert estimate_finish("5'00\"/km", None) == CALCULATING

    def test_at_finish(self):
        assert estimate_finish("5'00\"/km", cp("도착", "42.195km", "3:30:00")) == CALCULATING

    def test_unparseable_pace(self):
        assert estimate_finish(CALCULATING, cp("10K", "10km", "0:50:00")) == CALCULATING


# =============================================================================
# Test Progress / Derive
# =============================================================================

class TestProgress:
    """Tests for last_passed and progress_percentage."""

    def test_last_passed(self):
        checkpoints = [cp("출발", "0km", "0:00:00"), cp("5K", "5km", "0:25:00"), cp("10K", "10km")]
        assert last_passed(checkpoints).name == "5K"

    def test_none_passed(self):
        assert last_passed([cp("출발", "0km")]) is None

    def test_percentage(self):
        checkpoints = [cp("A", "0km", "0:00:00"), cp("B", "5km", "0:25:00"), cp("C", "10km"), cp("D", "15km")]
        assert progress_percentage(checkpoints) == 50.0

    def test_empty(self):
        assert progress_percentage([]) is None


class TestDerive:
    """Tests for derive function."""

    def test_all_values(self):
        checkpoints = [
            cp("출발", "0km", "0:00:00"),
            cp("5K", "5km", "0:25:00"),
            cp("10K", "10km", "0:50:00"),
            cp("하프", "21.0975km"),
        ]
        derived = derive(checkpoints, SEOUL_COURSE)

        assert derived.current_checkpoint == "10K"
        assert derived.progress_percentage == 75.0
        assert derived.pace == "5'00\"/km"
        assert derived.estimated_finish == "03:30:00"
        assert derived.last_passed_km == 10.0

        start, gwanghwamun = SEOUL_COURSE.checkpoints[0], SEOUL_COURSE.checkpoints[1]
        assert derived.position.lat == pytest.approx(
            start.lat + (gwanghwamun.lat - start.lat) * 10 / 12
        )

    def test_at_start(self):
        derived = derive([cp("출발", "0km", "0:00:00"), cp("5K", "5km")], SEOUL_COURSE)

        assert derived.pace is None
        assert derived.estimated_finish == CALCULATING
        assert derived.position == Position(37.5683, 126.8970)

    def test_unplaceable_distance(self):
        derived = derive([cp("반환점", "반환점", "1:00:00")], SEOUL_COURSE)
        assert derived.current_checkpoint == "반환점"
        assert derived.position is None
