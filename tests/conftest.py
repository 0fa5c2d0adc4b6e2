"""Shared fixtures for API tests.

Every test gets a fresh in-memory MongoDB (mongomock-motor) wired in through
FastAPI's dependency overrides, so no database server is required.
"""

import asyncio
import os

# Settings are read at import time; configure them before importing the app
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_API_KEY"] = "test-admin-key"

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.database import ensure_indexes, get_database
from app.main import app

ADMIN_HEADERS = {"X-Admin-Key": "test-admin-key"}


def run(coro):
    """Run a database coroutine from synchronous test code."""
    return asyncio.run(coro)


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def db():
    """Fresh in-memory database with the production indexes."""
    database = AsyncMongoMockClient()["storefront_test"]
    run(ensure_indexes(database))
    return database


@pytest.fixture
def client(db):
    """Test client bound to the in-memory database."""
    app.dependency_overrides[get_database] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


# =============================================================================
# Account Fixtures
# =============================================================================


@pytest.fixture
def register_user(client):
    """Factory registering an account and returning (auth headers, user profile)."""

    def _register(email, role="customer", name="Test User", password="password123"):
        response = client.post(
            "/api/register",
            json={"name": name, "email": email, "password": password, "role": role},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register


@pytest.fixture
def customer(register_user):
    return register_user("customer@example.com", name="Casey Customer")


@pytest.fixture
def customer_headers(customer):
    return customer[0]


@pytest.fixture
def vendor(register_user):
    return register_user("vendor@example.com", role="vendor", name="Acme Apparel")


@pytest.fixture
def vendor_headers(vendor):
    return vendor[0]


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def product_payload():
    return {
        "name": "Linen Shirt",
        "description": "Breathable linen shirt",
        "price": 25.0,
        "category": "Shirts",
        "image": "https://example.com/linen.jpg",
        "stock": 10,
        "sizes": ["M", "L"],
        "colors": ["Beige"],
    }


@pytest.fixture
def product(client, vendor_headers, product_payload):
    """Product owned by the default vendor."""
    response = client.post("/api/vendor/products", json=product_payload, headers=vendor_headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def seeded_products(client):
    """The sample catalog (unowned products)."""
    response = client.post("/api/seed-products", headers=ADMIN_HEADERS)
    assert response.status_code == 200, response.text
    return client.get("/api/products").json()


@pytest.fixture
def shipping_info():
    return {
        "full_name": "Casey Customer",
        "email": "customer@example.com",
        "phone": "+919876543210",
        "address": "12 MG Road",
        "city": "Bengaluru",
        "state": "Karnataka",
        "zip_code": "560001",
    }


@pytest.fixture
def place_order(client, shipping_info):
    """Factory posting an order and returning the raw response."""

    def _place(headers, items, payment_method="cod", total=None):
        payload = {
            "items": items,
            "shipping_info": shipping_info,
            "payment_method": payment_method,
        }
        if total is not None:
            payload["total"] = total
        return client.post("/api/orders", json=payload, headers=headers)

    return _place
