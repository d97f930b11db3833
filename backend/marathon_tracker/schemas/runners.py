"""
Runner API schemas.

Optional fields are omitted from responses when unknown
(serialize with exclude_none=True).
"""

from typing import Optional

from marathon_tracker.features.runners.models import Runner

from .common import CamelModel, LatLngSchema


class CheckpointSchema(CamelModel):
    name: str
    distance: str
    time: Optional[str] = None
    passed: bool


class RunnerSchema(CamelModel):
    bib_number: str
    name: str
    category: Optional[str] = None
    checkpoints: list[CheckpointSchema] = []
    current_checkpoint: Optional[str] = None
    current_position: Optional[LatLngSchema] = None
    total_distance: Optional[str] = None
    elapsed_time: Optional[str] = None
    pace: Optional[str] = None
    estimated_finish: Optional[str] = None
    progress_percentage: Optional[float] = None

    @classmethod
    def from_runner(cls, runner: Runner) -> "RunnerSchema":
        position = runner.current_position
        return cls(
            bib_number=runner.bib_number,
            name=runner.name,
            category=runner.category,
            checkpoints=[
                CheckpointSchema(
                    name=cp.name,
                    distance=cp.distance_label,
                    time=cp.time,
                    passed=cp.passed,
                )
                for cp in runner.checkpoints
            ],
            current_checkpoint=runner.current_checkpoint,
            current_position=(
                LatLngSchema(lat=position.lat, lng=position.lng) if position else None
            ),
            total_distance=runner.total_distance,
            elapsed_time=runner.elapsed_time,
            pace=runner.pace,
            estimated_finish=runner.estimated_finish,
            progress_percentage=runner.progress_percentage,
        )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
