import pytest
from fastapi.testclient import TestClient

from carebook.main import app
from carebook.roster import ROSTER


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def roster():
    return ROSTER


@pytest.fixture
def doctors_by_name(roster):
    return {doctor.name: doctor for doctor in roster}
