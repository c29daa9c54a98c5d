"""
tests/test_api.py

HTTP-level tests for the Midas API using FastAPI's TestClient.
Each test builds its own app so stores never leak between tests.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from midas.api.dependencies import get_settings
from midas.config import MidasSettings
from midas.main import create_app

PS5 = {
    "url": "https://www.amazon.com/dp/B08FC6MR62",
    "name": "PS5",
    "retailer": "Amazon",
    "target_price": "399.99",
}


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client


def _add(client: TestClient, user: str, **overrides: str) -> dict:
    response = client.post("/products", params={"user": user}, json={**PS5, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "products": 0}


def test_retailers(client: TestClient) -> None:
    assert client.get("/retailers").json() == {"retailers": ["Best Buy", "Amazon"]}


# ---------------------------------------------------------------------------
# Login
# ---------------------------------------------------------------------------


class TestLogin:
    def test_regular_login(self, client: TestClient) -> None:
        response = client.post("/login", json={"username": "alice", "password": "pw"})
        assert response.status_code == 200
        assert response.json() == {"username": "alice", "role": "regular", "is_admin": False}

    def test_mixed_case_admin_login(self, client: TestClient) -> None:
        body = client.post("/login", json={"username": "Admin", "password": "pw"}).json()
        assert body["role"] == "admin"
        assert body["is_admin"] is True
        assert body["username"] == "Admin"

    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "", "password": "pw"},
            {"username": "alice", "password": ""},
        ],
    )
    def test_empty_field_rejected(self, client: TestClient, payload: dict) -> None:
        response = client.post("/login", json=payload)
        assert response.status_code == 401
        assert response.json()["detail"]["code"] == "login_rejected"

    def test_missing_field_is_unprocessable(self, client: TestClient) -> None:
        assert client.post("/login", json={"username": "alice"}).status_code == 422


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------


class TestProducts:
    def test_add_and_list(self, client: TestClient) -> None:
        body = _add(client, "alice")
        assert body == {"message": "Product successfully added for tracking!"}

        listing = client.get("/products", params={"user": "alice"}).json()
        assert listing["username"] == "alice"
        assert listing["is_admin"] is False
        [product] = listing["products"]
        assert product["url"] == PS5["url"]
        assert product["name"] == "PS5"
        assert product["retailer"] == "Amazon"
        assert product["added_by"] == "alice"
        assert product["target_price"] == pytest.approx(399.99)
        assert product["created_at"]

    def test_other_regular_user_cannot_see(self, client: TestClient) -> None:
        _add(client, "alice")
        assert client.get("/products", params={"user": "bob"}).json()["products"] == []

    def test_admin_sees_all_newest_first(self, client: TestClient) -> None:
        _add(client, "alice", name="first")
        _add(client, "bob", name="second")

        listing = client.get("/products", params={"user": "ADMIN"}).json()
        assert listing["is_admin"] is True
        assert [p["name"] for p in listing["products"]] == ["second", "first"]

    def test_role_query_param_is_ignored(self, client: TestClient) -> None:
        _add(client, "alice")
        listing = client.get("/products", params={"user": "bob", "role": "admin"}).json()
        assert listing["role"] == "regular"
        assert listing["products"] == []

    def test_invalid_retailer(self, client: TestClient) -> None:
        response = client.post(
            "/products", params={"user": "alice"}, json={**PS5, "retailer": "Walmart"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_retailer"
        assert client.get("/health").json()["products"] == 0

    def test_invalid_url(self, client: TestClient) -> None:
        response = client.post(
            "/products", params={"user": "alice"}, json={**PS5, "retailer": "Best Buy"}
        )
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "invalid_url"

    def test_unparsable_target_price_is_accepted(self, client: TestClient) -> None:
        _add(client, "alice", target_price="about 400")
        [product] = client.get("/products", params={"user": "alice"}).json()["products"]
        assert product["target_price"] is None

    def test_target_price_is_optional(self, client: TestClient) -> None:
        payload = {k: v for k, v in PS5.items() if k != "target_price"}
        response = client.post("/products", params={"user": "alice"}, json=payload)
        assert response.status_code == 201

    @pytest.mark.parametrize("price, expected", [(399.99, 399.99), (400, 400.0)])
    def test_numeric_target_price_is_accepted(
        self, client: TestClient, price: float, expected: float
    ) -> None:
        response = client.post(
            "/products", params={"user": "alice"}, json={**PS5, "target_price": price}
        )
        assert response.status_code == 201, response.text
        [product] = client.get("/products", params={"user": "alice"}).json()["products"]
        assert product["target_price"] == pytest.approx(expected)

    def test_padded_target_price_is_dropped(self, client: TestClient) -> None:
        _add(client, "alice", target_price=" 12.50 ")
        [product] = client.get("/products", params={"user": "alice"}).json()["products"]
        assert product["target_price"] is None

    def test_add_logs_actor_context(self, client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="midas.api.routers.product_router"):
            _add(client, "Admin")

        events = [
            json.loads(record.getMessage())
            for record in caplog.records
            if record.name == "midas.api.routers.product_router"
        ]
        assert {"event": "product_added", "username": "Admin", "role": "admin"}.items() <= events[-1].items()

    def test_missing_user_defaults_to_anonymous(self, client: TestClient) -> None:
        assert client.post("/products", json=PS5).status_code == 201
        [product] = client.get("/products").json()["products"]
        assert product["added_by"] == "Anonymous"

    def test_empty_user_rejected(self, client: TestClient) -> None:
        assert client.get("/products", params={"user": ""}).status_code == 422

    def test_apps_have_independent_stores(self, client: TestClient) -> None:
        _add(client, "alice")
        with TestClient(create_app()) as other:
            assert other.get("/health").json()["products"] == 0


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


class TestDashboard:
    def test_shows_three_most_recent(self, client: TestClient) -> None:
        for index in range(5):
            _add(client, "alice", name=f"item-{index}")

        body = client.get("/dashboard", params={"user": "alice"}).json()
        assert body["retailers"] == ["Best Buy", "Amazon"]
        assert body["total_products"] == 5
        assert [p["name"] for p in body["recent_products"]] == ["item-4", "item-3", "item-2"]

    def test_empty_dashboard(self, client: TestClient) -> None:
        body = client.get("/dashboard", params={"user": "carol"}).json()
        assert body["recent_products"] == []
        assert body["total_products"] == 0
        assert body["is_admin"] is False

    def test_limit_comes_from_settings(self) -> None:
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: MidasSettings(recent_products_limit=1)
        with TestClient(app) as client:
            _add(client, "admin", name="old")
            _add(client, "bob", name="new")
            body = client.get("/dashboard", params={"user": "admin"}).json()

        assert body["is_admin"] is True
        assert [p["name"] for p in body["recent_products"]] == ["new"]
        assert body["total_products"] == 2
