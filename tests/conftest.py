from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_sampler, get_today
from api.main import app
from core.sampling import RangeSampler

PINNED_TODAY = date(2026, 10, 19)


@pytest.fixture
def client():
    app.dependency_overrides[get_sampler] = lambda: RangeSampler(seed=1234)
    app.dependency_overrides[get_today] = lambda: PINNED_TODAY
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
