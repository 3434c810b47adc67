"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from nwsclient import NWSClient, NWSSettings

FIXTURE_DIR = Path(__file__).parent / "fixtures"
BASE = "https://api.weather.gov"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def client():
    c = NWSClient(NWSSettings(user_agent="nwsclient-tests/0.1"))
    yield c
    c.close()


@pytest.fixture
def point_json() -> dict:
    return load_fixture("points_chicago.json")


@pytest.fixture
def forecast_json() -> dict:
    return load_fixture("forecast_chicago.json")


@pytest.fixture
def hourly_json() -> dict:
    return load_fixture("forecast_hourly_chicago.json")


@pytest.fixture
def office_json() -> dict:
    return load_fixture("office_lot.json")


@pytest.fixture
def stations_json() -> dict:
    return load_fixture("stations_chicago.json")


@pytest.fixture
def problem_json() -> dict:
    return load_fixture("problem_not_found.json")
