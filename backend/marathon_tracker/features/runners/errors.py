"""
Runner lookup errors.

Every failure carries an ErrorKind; the API boundary maps kind to
status code, messages are for display only.
"""

from typing import Optional

from marathon_tracker.shared.constants import ErrorKind


class TrackerError(Exception):
    """Base lookup error."""

    kind: ErrorKind = ErrorKind.UPSTREAM_UNAVAILABLE
    default_message = "러너 정보를 가져올 수 없습니다. 잠시 후 다시 시도해주세요."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedQueryError(TrackerError):
    """Empty or invalid query string."""

    kind = ErrorKind.MALFORMED_QUERY
    default_message = "검색어를 입력해주세요"


class ConfigurationError(TrackerError):
    """Query needs a source that is not configured."""

    kind = ErrorKind.CONFIGURATION
    default_message = "이름 검색을 사용하려면 MARATHON_API_BASE를 설정하세요"


class RunnerNotFoundError(TrackerError):
    """No result page / record for this bib."""

    kind = ErrorKind.NOT_FOUND
    default_message = "해당 배번의 러너 정보를 찾을 수 없습니다"


class UpstreamError(TrackerError):
    """Network failure, timeout or non-2xx response from the result source."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        if message is None and status is not None:
            message = f"Upstream {status}: {body or ''}".strip()
        super().__init__(message)
        self.status = status
        self.body = body
        if status == 404:
            self.kind = ErrorKind.NOT_FOUND


class UpstreamTimeoutError(UpstreamError):
    """Result source did not answer in time."""

    default_message = "서버 응답 시간이 초과되었습니다. 다시 시도해주세요."


class ParseError(TrackerError):
    """Source page/payload yielded no recognizable checkpoint."""

    kind = ErrorKind.PARSE_FAILURE
    default_message = "러너 정보를 파싱할 수 없습니다. 배번을 확인하거나 나중에 다시 시도해주세요."


class NoRecordsYetError(TrackerError):
    """Runner exists but has not passed any timing mat."""

    kind = ErrorKind.NO_RECORDS_YET
    default_message = "아직 체크포인트 기록이 없습니다"


class NoBibError(TrackerError):
    """Last passed distance cannot be placed on the course."""

    kind = ErrorKind.POSITION_UNRESOLVABLE
    default_message = "거리 정보를 파싱할 수 없습니다"
