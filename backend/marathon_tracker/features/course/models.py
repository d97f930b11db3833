"""Data models for the course (dataclasses, no I/O)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Position:
    """A point on the map."""

    lat: float
    lng: float


@dataclass(frozen=True)
class CourseCheckpoint:
    """A named point of the course with a known km-mark."""

    name: str  # "신설동역"
    distance_label: str  # "~16km"
    distance_km: float  # 16.0
    lat: float
    lng: float

    @property
    def position(self) -> Position:
        return Position(lat=self.lat, lng=self.lng)


@dataclass(frozen=True)
class Course:
    """Ordered checkpoints plus the polyline drawn on the map."""

    name: str
    checkpoints: tuple[CourseCheckpoint, ...]
    path: tuple[Position, ...] = field(default_factory=tuple)

    @property
    def finish_km(self) -> float:
        return self.checkpoints[-1].distance_km
