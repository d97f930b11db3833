"""Runners feature module — result extraction, derived values, Runner snapshots."""

from .models import CheckpointRecord, Derivation, Extraction, Runner
from .errors import (
    TrackerError,
    MalformedQueryError,
    ConfigurationError,
    RunnerNotFoundError,
    UpstreamError,
    UpstreamTimeoutError,
    ParseError,
    NoRecordsYetError,
    NoBibError,
)
from .sources import (
    ResultSource,
    HtmlResultSource,
    UpstreamJsonSource,
    build_source,
)
from .service import RunnerService, get_runner_service, assemble_runner

__all__ = [
    # Models
    "CheckpointRecord",
    "Derivation",
    "Extraction",
    "Runner",
    # Errors
    "TrackerError",
    "MalformedQueryError",
    "ConfigurationError",
    "RunnerNotFoundError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "ParseError",
    "NoRecordsYetError",
    "NoBibError",
    # Sources
    "ResultSource",
    "HtmlResultSource",
    "UpstreamJsonSource",
    "build_source",
    # Service
    "RunnerService",
    "get_runner_service",
    "assemble_runner",
]
