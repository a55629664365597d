"""GraphQL and REST endpoint tests against the FastAPI app."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from space_trips.api.main import create_app
from space_trips.application.context import AppContext
from space_trips.security.identity_token import encode_identity_token
from space_trips.shared.exceptions import CatalogUnavailableError, StoreUnavailableError

LAUNCHES_QUERY = """
query Launches($pageSize: Int, $after: String) {
  launches(pageSize: $pageSize, after: $after) {
    cursor
    hasMore
    launches { id isBooked mission { name missionPatch } rocket { id name } }
  }
}
"""

BOOK_TRIPS = """
mutation Book($ids: [ID!]!) {
  bookTrips(launchIds: $ids) { success message launches { id isBooked } }
}
"""


@pytest.fixture()
def client(app_ctx):
    with TestClient(create_app(app_ctx)) as test_client:
        yield test_client


def _gql(client: TestClient, query: str, variables: dict | None = None, *, email: str | None = None) -> dict:
    headers = {"Authorization": f"Bearer {encode_identity_token(email)}"} if email else {}
    resp = client.post("/graphql", json={"query": query, "variables": variables or {}}, headers=headers)
    assert resp.status_code == 200
    return resp.json()


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_diagnostics_reports_backends(client):
    data = client.get("/diagnostics").json()
    assert data["catalog_source"] == "mock_catalog"
    assert data["store_backend"] == "sqlite"
    assert "hits" in data["catalog_cache"]


def test_launches_first_page(client):
    body = _gql(client, LAUNCHES_QUERY)
    assert "errors" not in body
    page = body["data"]["launches"]
    assert [launch["id"] for launch in page["launches"]] == ["7", "6", "5"]
    assert page["hasMore"] is True
    first = page["launches"][0]
    assert first["isBooked"] is False
    assert first["mission"]["missionPatch"] == "https://img.example/7-large.png"
    assert first["rocket"] == {"id": "falcon9", "name": "Falcon 9"}


def test_cursor_walk_ends_without_more(client):
    seen: list[str] = []
    after = None
    while True:
        page = _gql(client, LAUNCHES_QUERY, {"pageSize": 3, "after": after})["data"]["launches"]
        seen.extend(launch["id"] for launch in page["launches"])
        if not page["hasMore"]:
            break
        after = page["cursor"]
    assert seen == ["7", "6", "5", "4", "3", "2", "1"]


def test_small_mission_patch(client):
    body = _gql(client, '{ launch(id: "2") { mission { missionPatch(size: SMALL) } } }')
    assert body["data"]["launch"]["mission"]["missionPatch"] == "https://img.example/2-small.png"


def test_unknown_launch_is_null(client):
    assert _gql(client, '{ launch(id: "404") { id } }')["data"]["launch"] is None


def test_invalid_cursor_is_bad_user_input(client):
    body = _gql(client, LAUNCHES_QUERY, {"after": "bogus"})
    assert body["data"] is None
    assert body["errors"][0]["extensions"]["code"] == "BAD_USER_INPUT"


def test_catalog_outage_is_service_unavailable(store, settings):
    class _DownCatalog:
        source = "down"

        def get_all(self):
            raise CatalogUnavailableError(self.source, "offline")

    app_ctx = AppContext(settings=settings, catalog=_DownCatalog(), store=store)
    with TestClient(create_app(app_ctx)) as client:
        body = _gql(client, LAUNCHES_QUERY)
    assert body["errors"][0]["extensions"]["code"] == "SERVICE_UNAVAILABLE"


def test_store_failure_is_service_unavailable(settings, catalog):
    class _LockedStore:
        backend = "locked"

        def find_or_create_user(self, email=None):
            raise StoreUnavailableError("booking store failure: database is locked")

    app_ctx = AppContext(settings=settings, catalog=catalog, store=_LockedStore())
    with TestClient(create_app(app_ctx)) as client:
        body = _gql(client, "{ me { email } }", email="pilot@x.com")
    assert body["data"] == {"me": None}
    assert body["errors"][0]["extensions"]["code"] == "SERVICE_UNAVAILABLE"


def test_login_then_me(client):
    token = _gql(client, 'mutation { login(email: "pilot@x.com") }')["data"]["login"]
    assert token == encode_identity_token("pilot@x.com")

    resp = client.post("/graphql", json={"query": "{ me { email trips { id } } }"}, headers={"Authorization": token})
    me = resp.json()["data"]["me"]
    assert me == {"email": "pilot@x.com", "trips": []}


def test_login_with_invalid_email_is_null(client):
    assert _gql(client, 'mutation { login(email: "nope") }')["data"]["login"] is None


def test_anonymous_me_is_demo_user(client, settings):
    me = _gql(client, "{ me { email } }")["data"]["me"]
    assert me["email"] == settings.demo_user_email


def test_book_trips_partial_success(client):
    body = _gql(client, BOOK_TRIPS, {"ids": ["1", "999"]}, email="pilot@x.com")
    result = body["data"]["bookTrips"]
    assert result["success"] is False
    assert result["message"] == "the following launches couldn't be booked: 999"
    assert result["launches"] == [{"id": "1", "isBooked": True}]


def test_is_booked_differs_between_users(client):
    _gql(client, BOOK_TRIPS, {"ids": ["6"]}, email="a@x.com")

    query = '{ launch(id: "6") { isBooked } }'
    assert _gql(client, query, email="a@x.com")["data"]["launch"]["isBooked"] is True
    assert _gql(client, query, email="b@x.com")["data"]["launch"]["isBooked"] is False


def test_book_then_cancel_trip(client):
    _gql(client, BOOK_TRIPS, {"ids": ["4", "5"]}, email="a@x.com")

    me = _gql(client, "{ me { trips { id } } }", email="a@x.com")["data"]["me"]
    assert [trip["id"] for trip in me["trips"]] == ["4", "5"]

    cancel = 'mutation { cancelTrip(launchId: "4") { success message launches { id isBooked } } }'
    result = _gql(client, cancel, email="a@x.com")["data"]["cancelTrip"]
    assert result == {"success": True, "message": "trip cancelled", "launches": [{"id": "4", "isBooked": False}]}

    again = _gql(client, cancel, email="a@x.com")["data"]["cancelTrip"]
    assert again["success"] is False
    assert again["message"] == "failed to cancel trip"
    assert again["launches"] == []


def test_docs_are_off_unless_enabled(monkeypatch, app_ctx):
    with TestClient(create_app(app_ctx)) as client:
        assert client.get("/docs").status_code == 404

    monkeypatch.setenv("ENABLE_DOCS", "true")
    with TestClient(create_app(app_ctx)) as client:
        assert client.get("/docs").status_code == 200
