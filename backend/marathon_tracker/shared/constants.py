"""
Unified constants for runner lookups.

This module provides a single source of truth for race distances,
display sentinels and error kinds across the entire application.
"""

from enum import Enum


# Official marathon distance
MARATHON_DISTANCE_KM = 42.195
HALF_MARATHON_DISTANCE_KM = 21.0975

# Shown instead of pace / finish estimate until enough splits exist.
# Distinct from "no data": the UI renders it as "calculating".
CALCULATING = "계산중"
NO_ELAPSED_RECORD = "기록 없음"
DEFAULT_CATEGORY = "Full"


def runner_placeholder_name(bib_number: str) -> str:
    """Display name used when the result page shows none."""
    return f"러너 #{bib_number}"


class ErrorKind(str, Enum):
    """
    Classification of lookup failures.

    Used in:
    - TrackerError subclasses (one kind per failure)
    - API boundary (kind -> HTTP status)
    """
    MALFORMED_QUERY = "malformed_query"
    CONFIGURATION = "configuration"
    NOT_FOUND = "not_found"
    NO_RECORDS_YET = "no_records_yet"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    PARSE_FAILURE = "parse_failure"
    POSITION_UNRESOLVABLE = "position_unresolvable"


# Mapping: ErrorKind -> HTTP status
ERROR_KIND_TO_STATUS: dict[ErrorKind, int] = {
    ErrorKind.MALFORMED_QUERY: 400,
    ErrorKind.CONFIGURATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NO_RECORDS_YET: 404,
    ErrorKind.UPSTREAM_UNAVAILABLE: 500,
    ErrorKind.PARSE_FAILURE: 500,
    ErrorKind.POSITION_UNRESOLVABLE: 500,
}
