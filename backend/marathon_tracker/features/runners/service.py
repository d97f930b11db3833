"""RunnerService — query -> source -> derivation -> Runner."""

from __future__ import annotations

import logging
from typing import Optional

from marathon_tracker.features.course.models import Course
from marathon_tracker.shared.constants import (
    CALCULATING,
    DEFAULT_CATEGORY,
    NO_ELAPSED_RECORD,
    runner_placeholder_name,
)

from .derivation import derive
from .errors import (
    ConfigurationError,
    MalformedQueryError,
    NoBibError,
    NoRecordsYetError,
    ParseError,
)
from .models import Extraction, Runner
from .sources import ResultSource

logger = logging.getLogger(__name__)

MAX_QUERY_LENGTH = 50

# Module-level singleton
_service: Optional["RunnerService"] = None


def get_runner_service() -> "RunnerService":
    """Get or create RunnerService from settings (source chosen once)."""
    global _service
    if _service is None:
        from marathon_tracker.config import settings
        from marathon_tracker.features.course.loader import get_course

        from .sources import build_source

        _service = RunnerService(build_source(settings), get_course())
    return _service


def normalize_query(query: Optional[str]) -> str:
    """
    Strip and validate a bib number / name query.

    Raises:
        MalformedQueryError: Empty, too long, or has control characters
    """
    query = (query or "").strip()
    if not query:
        raise MalformedQueryError()
    if len(query) > MAX_QUERY_LENGTH or not query.isprintable():
        raise MalformedQueryError("잘못된 검색어입니다")
    return query


def assemble_runner(extraction: Extraction, course: Course) -> Runner:
    """
    Build the Runner snapshot.

    Values supplied by the source (position, pace, finish estimate, total
    distance) win over derived ones.

    Raises:
        ParseError: No checkpoints at all
        NoRecordsYetError: Checkpoints exist, none passed
        NoBibError: Last passed distance can't be placed on the course
    """
    checkpoints = extraction.checkpoints
    if not checkpoints:
        raise ParseError()
    if not any(cp.passed for cp in checkpoints):
        raise NoRecordsYetError()

    derived = derive(checkpoints, course)
    last = derived.last_passed

    position = extraction.position or derived.position
    if position is None:
        logger.warning(
            f"Bib {extraction.bib_number}: cannot place {last.distance_label!r} on course"
        )
        raise NoBibError()

    bib = extraction.bib_number
    return Runner(
        bib_number=bib,
        name=extraction.name or runner_placeholder_name(bib),
        category=extraction.category or DEFAULT_CATEGORY,
        checkpoints=checkpoints,
        current_checkpoint=derived.current_checkpoint,
        current_position=position,
        total_distance=extraction.total_distance or last.distance_label,
        elapsed_time=last.time or NO_ELAPSED_RECORD,
        pace=extraction.pace or derived.pace or CALCULATING,
        estimated_finish=extraction.estimated_finish or derived.estimated_finish,
        progress_percentage=derived.progress_percentage,
    )


class RunnerService:
    """Looks up runners through one result source on one course."""

    def __init__(self, source: ResultSource, course: Course):
        self.source = source
        self.course = course

    async def lookup(self, query: Optional[str]) -> Runner:
        """
        Look up a runner by bib number or name.

        Raises:
            TrackerError subclasses, see errors.py
        """
        query = normalize_query(query)
        if not self.source.supports(query):
            raise ConfigurationError()

        logger.info(f"Lookup {query!r} via {self.source.name} source")
        extraction = await self.source.fetch(query)
        runner = assemble_runner(extraction, self.course)
        logger.info(
            f"Bib {runner.bib_number}: {runner.current_checkpoint} "
            f"({runner.progress_percentage:.1f}%), pace {runner.pace}"
        )
        return runner
