"""
Runner API Routes

Lookup of a single runner by bib number or name.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from marathon_tracker.features.runners import RunnerService, TrackerError, get_runner_service
from marathon_tracker.schemas.common import ErrorSchema
from marathon_tracker.schemas.runners import RunnerSchema
from marathon_tracker.shared.constants import ERROR_KIND_TO_STATUS

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{query}",
    response_model=RunnerSchema,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorSchema}, 404: {"model": ErrorSchema}, 500: {"model": ErrorSchema}},
)
async def get_runner(query: str, service: RunnerService = Depends(get_runner_service)):
    """
    Get runner status by bib number or name.

    Name search requires the JSON API source (MARATHON_API_BASE).
    """
    try:
        runner = await service.lookup(query)
        return RunnerSchema.from_runner(runner)
    except TrackerError as e:
        status = ERROR_KIND_TO_STATUS[e.kind]
        logger.warning(f"Runner {query!r}: {e.kind.value} ({status}) {e.message}")
        return JSONResponse(
            status_code=status,
            content={"error": e.message, "kind": e.kind.value},
        )
    except Exception:
        logger.exception(f"Runner API error for {query!r}")
        return JSONResponse(
            status_code=500,
            content={"error": "서버 오류가 발생했습니다", "kind": "internal"},
        )
