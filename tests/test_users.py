from concurrent.futures import ThreadPoolExecutor

import pytest

from showcase_api.app.core.errors import InvalidArgumentError
from showcase_api.app.schemas.user import UserCreate
from showcase_api.app.services.user_service import SEED_USERS, UserService


SEED_NAMES = [name for name, _, _ in SEED_USERS]


def test_seed_users_are_listed_in_order(user_service):
    listing = user_service.list_users()

    assert [user.name for user in listing.users] == SEED_NAMES
    assert [user.id for user in listing.users] == [1, 2, 3, 4, 5]
    assert listing.total == 5
    assert listing.filtered is False
    assert listing.filter is None


@pytest.mark.parametrize("role", ["developer", "DEVELOPER", "Developer"])
def test_role_filter_is_case_insensitive(user_service, role):
    listing = user_service.list_users(role)

    assert [user.name for user in listing.users] == ["Alice Johnson", "Diana Prince"]
    assert listing.total == 2
    assert listing.filtered is True
    assert listing.filter == role


def test_role_filter_is_an_exact_match(user_service):
    assert user_service.list_users("qa").total == 0
    assert user_service.list_users("qa engineer").total == 1


def test_empty_role_means_no_filter(user_service):
    listing = user_service.list_users("")

    assert listing.total == 5
    assert listing.filtered is False


def test_create_user_appends_with_next_id(user_service):
    before = user_service.list_users().total

    user = user_service.create_user(UserCreate(name="Zoe", email="zoe@example.com", role="Designer"))

    after = user_service.list_users()
    assert user.id == before + 1
    assert after.total == before + 1
    assert after.users[-1] == user
    assert [u.name for u in user_service.list_users("designer").users] == ["Bob Smith", "Zoe"]


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "email": "e@x.com", "role": "Designer"},
        {"name": "Zoe", "email": "", "role": "Designer"},
        {"name": "Zoe", "email": "e@x.com"},
        {"name": "Zoe", "email": "e@x.com", "role": None},
        {"name": 42, "email": "e@x.com", "role": "Designer"},
        {},
    ],
)
def test_incomplete_payload_is_rejected(payload):
    with pytest.raises(InvalidArgumentError) as exc_info:
        UserCreate.from_payload(payload)
    assert exc_info.value.message == "Name, email, and role are required"


def test_concurrent_creates_get_distinct_ids(user_service):
    def create(index):
        data = UserCreate(name=f"User {index}", email=f"u{index}@example.com", role="Tester")
        return user_service.create_user(data).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(create, range(50)))

    assert sorted(ids) == list(range(6, 56))
    assert len(user_service) == 55


def test_reset_restores_seed_data(user_service):
    user_service.create_user(UserCreate(name="Zoe", email="zoe@example.com", role="Designer"))

    user_service.reset()

    assert user_service.list_users().total == 5
    new_user = user_service.create_user(UserCreate(name="Yan", email="yan@example.com", role="Manager"))
    assert new_user.id == 6


def test_custom_seed():
    service = UserService(seed=[("Solo", "solo@example.com", "Owner")])

    assert service.list_users().total == 1
    assert service.create_user(UserCreate(name="Duo", email="duo@example.com", role="Owner")).id == 2


# --------------------------------------------------------------------------
# HTTP
# --------------------------------------------------------------------------

def test_list_users_endpoint(client):
    response = client.get("/api/users")

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 5
    assert body["filtered"] is False
    assert "filter" not in body
    assert body["users"][0] == {
        "id": 1,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "role": "Developer",
    }


def test_list_users_endpoint_with_filter(client):
    response = client.get("/api/users", params={"role": "developer"})

    body = response.json()
    assert response.status_code == 200
    assert [user["name"] for user in body["users"]] == ["Alice Johnson", "Diana Prince"]
    assert body["total"] == 2
    assert body["filtered"] is True
    assert body["filter"] == "developer"


def test_create_user_endpoint_then_list(client):
    response = client.post(
        "/api/users",
        json={"name": "Zoe", "email": "zoe@example.com", "role": "Designer"},
    )

    assert response.status_code == 201
    assert response.json() == {
        "message": "User created successfully",
        "user": {"id": 6, "name": "Zoe", "email": "zoe@example.com", "role": "Designer"},
    }
    assert client.get("/api/users").json()["total"] == 6


def test_create_user_endpoint_rejects_missing_fields(client):
    response = client.post("/api/users", json={"name": "", "email": "e@x.com", "role": "Designer"})

    assert response.status_code == 400
    assert response.json() == {"error": "Name, email, and role are required"}
    assert client.get("/api/users").json()["total"] == 5


def test_create_user_endpoint_rejects_bad_json(client):
    response = client.post(
        "/api/users",
        content=b'{"name": "Zoe",',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON in request body"}
    assert client.get("/api/users").json()["total"] == 5


def test_each_app_has_its_own_directory():
    from fastapi.testclient import TestClient

    from showcase_api.app.main import create_app

    with TestClient(create_app()) as first, TestClient(create_app()) as second:
        first.post("/api/users", json={"name": "Zoe", "email": "zoe@example.com", "role": "Designer"})

        assert first.get("/api/users").json()["total"] == 6
        assert second.get("/api/users").json()["total"] == 5
