"""Pytest fixtures for the schools API tests.

Every test gets its own copy of the dataset in a temporary directory and an
app instance pointed at it, with a dedicated logger so caplog can assert on
what the app logs.
"""

import json
import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from schools_api.config import Settings
from schools_api.main import create_app

KNOWN_GUID = "05024756-765e-41a9-89d7-1407436d9a58"
ABSENT_GUID = "00000000-0000-0000-0000-000000000000"

SCHOOLS = [
    {
        "guid": KNOWN_GUID,
        "school": "Oregon State University",
        "mascot": "Benny the Beaver",
        "nickname": "Beavers",
        "location": "Corvallis, OR, USA",
        "latlong": "44.5645659,-123.2620435",
        "ncaa": "Division I",
        "conference": "Pac-12 Conference",
    },
    {
        "guid": "1a8e3c52-9f4b-4d2e-8c71-5b0f2e6a9d13",
        "school": "University of Oregon",
        "mascot": "The Duck",
        "nickname": "Ducks",
        "location": "Eugene, OR, USA",
        "latlong": "44.0448302,-123.0726055",
        "ncaa": "Division I",
        "conference": "Big Ten Conference",
    },
    {
        "guid": "70a29ebc-5d8b-4fa0-a2d7-b16d8ec05f79",
        "school": "Linfield University",
        "mascot": "Wildcat",
        "nickname": "Wildcats",
        "location": "McMinnville, OR, USA",
        "latlong": "45.2012320,-123.1971553",
        "ncaa": "Division III",
        "conference": "Northwest Conference",
    },
]

TEST_LOGGER_NAME = "tests.schools_api"


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SCHOOLS), encoding="utf-8")
    return path


@pytest.fixture
def logger() -> logging.Logger:
    test_logger = logging.getLogger(TEST_LOGGER_NAME)
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest.fixture
def app(data_file: Path, logger: logging.Logger):
    settings = Settings(_env_file=None, data_file_path=str(data_file))
    return create_app(settings=settings, logger=logger)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
