from datetime import datetime, timezone
from pathlib import Path
import sys

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from showcase_api.app.main import create_app
from showcase_api.app.services.time_service import TimeService
from showcase_api.app.services.user_service import UserService


FIXED_INSTANT = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture
def user_service():
    return UserService()


@pytest.fixture
def app(user_service):
    return create_app(
        user_service=user_service,
        time_service=TimeService("UTC", clock=lambda: FIXED_INSTANT),
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
