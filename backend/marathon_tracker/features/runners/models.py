"""Data models for runner lookups (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field

from marathon_tracker.features.course.models import Position


@dataclass(frozen=True)
class CheckpointRecord:
    """One timing mat as read from the result source."""

    name: str  # "하프"
    distance_label: str  # "21.0975km"
    time: str | None  # cumulative "1:30:00", None if not passed
    passed: bool


@dataclass(frozen=True)
class Extraction:
    """What a result source returns for one query.

    Optional fields hold values the upstream already computed (JSON API);
    the assembler prefers them over derived ones.
    """

    bib_number: str
    name: str  # "" if the page shows none
    checkpoints: tuple[CheckpointRecord, ...]
    category: str | None = None
    position: Position | None = None
    total_distance: str | None = None
    pace: str | None = None
    estimated_finish: str | None = None


@dataclass(frozen=True)
class Derivation:
    """Values computed from a checkpoint list."""

    current_checkpoint: str | None
    progress_percentage: float | None
    pace: str | None  # M'SS"/km
    estimated_finish: str  # HH:MM:00 or CALCULATING
    last_passed: CheckpointRecord | None = None
    last_passed_km: float | None = None
    position: Position | None = None


@dataclass(frozen=True)
class Runner:
    """Canonical snapshot of a runner, one per query."""

    bib_number: str
    name: str
    checkpoints: tuple[CheckpointRecord, ...] = field(default_factory=tuple)
    category: str | None = None
    current_checkpoint: str | None = None
    current_position: Position | None = None
    total_distance: str | None = None
    elapsed_time: str | None = None
    pace: str | None = None
    estimated_finish: str | None = None
    progress_percentage: float | None = None
