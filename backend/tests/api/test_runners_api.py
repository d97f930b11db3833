"""
Tests for the HTTP boundary: status codes, camelCase bodies, error kinds.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from marathon_tracker.features.course import SEOUL_COURSE, Position
from marathon_tracker.features.runners import (
    CheckpointRecord,
    Extraction,
    NoRecordsYetError,
    ParseError,
    ResultSource,
    RunnerService,
    UpstreamError,
    UpstreamJsonSource,
    get_runner_service,
)
from marathon_tracker.main import app


# =============================================================================
# Test Data
# =============================================================================

EXTRACTION = Extraction(
    bib_number="1234",
    name="홍길동",
    category="Full",
    checkpoints=(
        CheckpointRecord("출발", "0km", "0:00:00", True),
        CheckpointRecord("5K", "5km", "0:25:00", True),
        CheckpointRecord("10K", "10km", "0:50:00", True),
        CheckpointRecord("15K", "15km", None, False),
    ),
)


class StubSource(ResultSource):
    def __init__(self, result=None, bib_only=False):
        self.result = result
        self.bib_only = bib_only

    @property
    def name(self) -> str:
        return "stub"

    def supports(self, query: str) -> bool:
        return query.isdigit() if self.bib_only else True

    async def fetch(self, query: str) -> Extraction:
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def client_with():
    """Client factory with RunnerService backed by a stub source."""

    def make(result=None, bib_only=False):
        service = RunnerService(StubSource(result, bib_only), SEOUL_COURSE)
        app.dependency_overrides[get_runner_service] = lambda: service
        return TestClient(app)

    yield make
    app.dependency_overrides.clear()


# =============================================================================
# Test Runner Endpoint
# =============================================================================

class TestGetRunner:
    """Tests for GET /api/v1/runners/{query}."""

    def test_success(self, client_with):
        response = client_with(EXTRACTION).get("/api/v1/runners/1234")

        assert response.status_code == 200
        body = response.json()
        assert body["bibNumber"] == "1234"
        assert body["name"] == "홍길동"
        assert body["currentCheckpoint"] == "10K"
        assert body["totalDistance"] == "10km"
        assert body["elapsedTime"] == "0:50:00"
        assert body["pace"] == "5'00\"/km"
        assert body["estimatedFinish"] == "03:30:00"
        assert body["progressPercentage"] == 75.0
        assert set(body["currentPosition"]) == {"lat", "lng"}
        assert body["checkpoints"][1] == {
            "name": "5K", "distance": "5km", "time": "0:25:00", "passed": True,
        }

    def test_unknown_values_omitted(self, client_with):
        body = client_with(EXTRACTION).get("/api/v1/runners/1234").json()
        # Not-yet-passed checkpoint has no time key
        assert "time" not in body["checkpoints"][3]

    def test_upstream_position(self, client_with):
        extraction = Extraction(
            bib_number="1234", name="", checkpoints=EXTRACTION.checkpoints,
            position=Position(37.6, 127.0),
        )
        body = client_with(extraction).get("/api/v1/runners/1234").json()
        assert body["currentPosition"] == {"lat": 37.6, "lng": 127.0}
        assert body["name"] == "러너 #1234"

    def test_numeric_upstream_fields(self):
        """A loosely typed upstream payload still yields a 200 with string fields."""
        payload = {
            "num": 1234,
            "records": [
                {"point": {"name": "5K", "distance": 5}, "time_point": "00:25:00"},
                {"point": {"name": "10K", "distance": 10}, "time_point": "00:50:00"},
            ],
            "pace_nettime": 300,
            "result_nettime": 12600,
        }
        source = UpstreamJsonSource(
            base_url="https://results.example.com",
            event_id="133",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=payload)),
        )
        app.dependency_overrides[get_runner_service] = lambda: RunnerService(source, SEOUL_COURSE)
        try:
            response = TestClient(app).get("/api/v1/runners/1234")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        body = response.json()
        assert body["bibNumber"] == "1234"
        assert body["pace"] == "300"
        assert body["estimatedFinish"] == "12600"
        assert body["totalDistance"] == "10km"

    def test_whitespace_query(self, client_with):
        response = client_with(EXTRACTION).get("/api/v1/runners/%20%20")

        assert response.status_code == 400
        assert response.json()["kind"] == "malformed_query"

    def test_name_without_json_source(self, client_with):
        response = client_with(EXTRACTION, bib_only=True).get("/api/v1/runners/홍길동")

        assert response.status_code == 400
        assert response.json()["kind"] == "configuration"

    def test_no_records_yet(self, client_with):
        response = client_with(NoRecordsYetError()).get("/api/v1/runners/1234")

        assert response.status_code == 404
        assert response.json() == {"error": "아직 체크포인트 기록이 없습니다", "kind": "no_records_yet"}

    def test_upstream_not_found(self, client_with):
        response = client_with(UpstreamError(status=404, body="")).get("/api/v1/runners/1234")

        assert response.status_code == 404
        assert response.json()["kind"] == "not_found"

    @pytest.mark.parametrize("error,kind", [
        (UpstreamError(status=502, body="bad gateway"), "upstream_unavailable"),
        (ParseError(), "parse_failure"),
    ])
    def test_server_side_failures(self, client_with, error, kind):
        response = client_with(error).get("/api/v1/runners/1234")

        assert response.status_code == 500
        assert response.json()["kind"] == kind
        assert response.json()["error"]

    def test_unexpected_error(self, client_with):
        response = client_with(RuntimeError("boom")).get("/api/v1/runners/1234")

        assert response.status_code == 500
        assert response.json()["kind"] == "internal"


# =============================================================================
# Test Course / Health
# =============================================================================

class TestCourseAndHealth:
    """Tests for GET /api/v1/course and /health."""

    def test_course(self):
        body = TestClient(app).get("/api/v1/course").json()

        assert body["finishKm"] == 42.195
        assert len(body["checkpoints"]) == 7
        assert body["checkpoints"][0]["distanceKm"] == 0
        assert body["checkpoints"][-1]["distance"] == "42.195km"
        assert len(body["path"]) == 40

    def test_health(self):
        response = TestClient(app).get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
