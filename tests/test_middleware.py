"""Tests for request tracing: X-Request-ID, access log, the catch-all error stage and lifespan logs."""

import logging

import pytest
from fastapi.testclient import TestClient

from schools_api.config import Settings
from schools_api.main import create_app
from schools_api.middleware import REQUEST_ID_HEADER, generate_request_id
from tests.conftest import ABSENT_GUID, KNOWN_GUID, TEST_LOGGER_NAME


def _access_lines(caplog):
    return [
        r.getMessage()
        for r in caplog.records
        if r.name == TEST_LOGGER_NAME and r.levelno == logging.INFO
    ]


class TestRequestId:
    def test_generated_ids_are_unique(self):
        assert len({generate_request_id() for _ in range(1000)}) == 1000

    @pytest.mark.parametrize(
        "path",
        ["/health", "/", f"/{KNOWN_GUID}", f"/{ABSENT_GUID}", "/invalid-guid", "/nonexistent/route"],
    )
    def test_every_response_has_header(self, client: TestClient, path):
        response = client.get(path)
        assert response.headers.get(REQUEST_ID_HEADER)

    def test_header_differs_per_request(self, client: TestClient):
        ids = {client.get("/health").headers[REQUEST_ID_HEADER] for _ in range(5)}
        assert len(ids) == 5

    def test_incoming_header_is_not_reused(self, client: TestClient):
        response = client.get("/health", headers={REQUEST_ID_HEADER: "client-chosen"})
        assert response.headers[REQUEST_ID_HEADER] != "client-chosen"


class TestAccessLog:
    def test_one_line_per_request(self, client: TestClient, caplog):
        with caplog.at_level(logging.DEBUG, logger=TEST_LOGGER_NAME):
            response = client.get(f"/{KNOWN_GUID}")

        request_id = response.headers[REQUEST_ID_HEADER]
        lines = [line for line in _access_lines(caplog) if request_id in line]
        assert lines == [f"200 GET /{KNOWN_GUID} [{request_id}]"]

    def test_logs_error_status(self, client: TestClient, caplog):
        with caplog.at_level(logging.DEBUG, logger=TEST_LOGGER_NAME):
            response = client.get("/nonexistent/route")

        request_id = response.headers[REQUEST_ID_HEADER]
        assert f"404 GET /nonexistent/route [{request_id}]" in _access_lines(caplog)


class TestUnhandledErrors:
    @pytest.fixture
    def failing_client(self, app):
        @app.get("/boom/now")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app) as test_client:
            yield test_client

    def test_unexpected_exception_becomes_500_envelope(self, failing_client, caplog):
        with caplog.at_level(logging.DEBUG, logger=TEST_LOGGER_NAME):
            response = failing_client.get("/boom/now")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["statusCode"] == 500
        assert error["message"] == "kaboom"
        assert error["requestId"] == response.headers[REQUEST_ID_HEADER]

        errors = [
            r for r in caplog.records
            if r.name == TEST_LOGGER_NAME and r.levelno == logging.ERROR
        ]
        assert len(errors) == 1


class TestLifespan:
    def test_startup_logs_configured_port(self, data_file, logger, caplog):
        settings = Settings(_env_file=None, port=8080, data_file_path=str(data_file))
        app = create_app(settings=settings, logger=logger)

        with caplog.at_level(logging.DEBUG, logger=TEST_LOGGER_NAME):
            with TestClient(app):
                pass

        lines = _access_lines(caplog)
        assert any(line.startswith("Server listening on port 8080") for line in lines)
        assert "HTTP server closed" in lines
