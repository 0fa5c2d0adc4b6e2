"""Tests for vendor routes.

Tests cover:
- Role gating on every vendor endpoint
- Vendor-scoped product listing and ownership on edits/deletes
- Order fulfilment listing and status transitions
"""

import pytest
from bson import ObjectId

from tests.conftest import run


VENDOR_ENDPOINTS = [
    ("get", "/api/vendor/products"),
    ("post", "/api/vendor/products"),
    ("put", f"/api/vendor/products/{ObjectId()}"),
    ("delete", f"/api/vendor/products/{ObjectId()}"),
    ("get", "/api/vendor/orders"),
    ("put", f"/api/vendor/orders/{ObjectId()}"),
]


# =============================================================================
# Role gating
# =============================================================================


class TestVendorGating:
    """Non-vendors are turned away before anything else happens."""

    @pytest.mark.parametrize("method,path", VENDOR_ENDPOINTS)
    def test_missing_token_returns_401(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 401

    @pytest.mark.parametrize("method,path", VENDOR_ENDPOINTS)
    def test_customer_token_returns_403(self, client, customer_headers, method, path):
        response = client.request(method, path, headers=customer_headers)

        assert response.status_code == 403

    def test_vendor_claim_in_token_is_not_trusted(self, client, db, vendor):
        headers, user = vendor
        # Demote in the store; the token still says "vendor"
        run(db.users.update_one({"_id": ObjectId(user["id"])}, {"$set": {"role": "customer"}}))

        response = client.get("/api/vendor/products", headers=headers)

        assert response.status_code == 403


# =============================================================================
# Vendor products
# =============================================================================


class TestVendorProducts:
    """Tests for /api/vendor/products."""

    def test_lists_only_own_products(self, client, register_user, vendor_headers, product, product_payload):
        rival_headers, _ = register_user("rival@example.com", role="vendor")
        client.post("/api/vendor/products", json=product_payload, headers=rival_headers)

        response = client.get("/api/vendor/products", headers=vendor_headers)

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [product["id"]]

    def test_create_records_vendor_name(self, product, vendor):
        _, vendor_user = vendor

        assert product["vendor"] == vendor_user["id"]
        assert product["vendor_name"] == "Acme Apparel"

    def test_update_own_product(self, client, vendor_headers, product):
        response = client.put(
            f"/api/vendor/products/{product['id']}",
            json={"stock": 99, "colors": ["Olive"]},
            headers=vendor_headers,
        )

        assert response.status_code == 200
        assert response.json()["stock"] == 99
        assert response.json()["colors"] == ["Olive"]

    def test_cannot_update_rival_product(self, client, register_user, product):
        rival_headers, _ = register_user("rival@example.com", role="vendor")

        response = client.put(
            f"/api/vendor/products/{product['id']}", json={"stock": 0}, headers=rival_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found or access denied"

    def test_unowned_products_are_not_vendor_listings(self, client, vendor_headers, seeded_products):
        target = seeded_products[0]

        response = client.put(
            f"/api/vendor/products/{target['id']}", json={"stock": 0}, headers=vendor_headers
        )

        assert response.status_code == 404

    def test_delete_own_product(self, client, vendor_headers, product):
        response = client.delete(f"/api/vendor/products/{product['id']}", headers=vendor_headers)

        assert response.status_code == 200
        assert client.get("/api/vendor/products", headers=vendor_headers).json() == []
        assert client.get(f"/api/products/{product['id']}").status_code == 404

    def test_cannot_delete_rival_product(self, client, register_user, product):
        rival_headers, _ = register_user("rival@example.com", role="vendor")

        response = client.delete(f"/api/vendor/products/{product['id']}", headers=rival_headers)

        assert response.status_code == 404
        assert client.get(f"/api/products/{product['id']}").status_code == 200


# =============================================================================
# Vendor orders
# =============================================================================


class TestVendorOrders:
    """Tests for /api/vendor/orders."""

    def test_lists_all_orders_with_customer(self, client, vendor_headers, customer_headers, product, place_order):
        order = place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}]).json()

        response = client.get("/api/vendor/orders", headers=vendor_headers)

        assert response.status_code == 200
        orders = response.json()
        assert [o["id"] for o in orders] == [order["id"]]
        assert orders[0]["customer"]["name"] == "Casey Customer"
        assert orders[0]["customer"]["email"] == "customer@example.com"

    def test_filter_by_status(self, client, vendor_headers, customer_headers, product, place_order):
        place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}])
        prepaid = place_order(
            customer_headers, [{"product_id": product["id"], "quantity": 1}], payment_method="card"
        ).json()

        response = client.get(
            "/api/vendor/orders", params={"status": "processing"}, headers=vendor_headers
        )

        assert [o["id"] for o in response.json()] == [prepaid["id"]]

    def test_mine_limits_to_orders_with_own_products(
        self, client, seeded_products, vendor_headers, customer_headers, product, place_order
    ):
        own = place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}]).json()
        place_order(customer_headers, [{"product_id": seeded_products[0]["id"], "quantity": 1}])

        everything = client.get("/api/vendor/orders", headers=vendor_headers).json()
        mine = client.get("/api/vendor/orders", params={"mine": "true"}, headers=vendor_headers).json()

        assert len(everything) == 2
        assert [o["id"] for o in mine] == [own["id"]]

    def test_update_status(self, client, vendor_headers, customer_headers, product, place_order):
        order = place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}]).json()

        response = client.put(
            f"/api/vendor/orders/{order['id']}", json={"status": "shipped"}, headers=vendor_headers
        )

        assert response.status_code == 200
        assert response.json()["status"] == "shipped"
        mine = client.get(f"/api/orders/{order['id']}", headers=customer_headers).json()
        assert mine["status"] == "shipped"

    def test_vendor_cancel_restocks(self, client, vendor_headers, customer_headers, product, place_order):
        order = place_order(customer_headers, [{"product_id": product["id"], "quantity": 6}]).json()

        response = client.put(
            f"/api/vendor/orders/{order['id']}", json={"status": "cancelled"}, headers=vendor_headers
        )

        assert response.status_code == 200
        assert client.get(f"/api/products/{product['id']}").json()["stock"] == 10

    def test_cancelled_is_terminal(self, client, vendor_headers, customer_headers, product, place_order):
        order = place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}]).json()
        url = f"/api/vendor/orders/{order['id']}"
        client.put(url, json={"status": "cancelled"}, headers=vendor_headers)

        response = client.put(url, json={"status": "processing"}, headers=vendor_headers)

        assert response.status_code == 400

    def test_unknown_status_is_rejected(self, client, vendor_headers, customer_headers, product, place_order):
        order = place_order(customer_headers, [{"product_id": product["id"], "quantity": 1}]).json()

        response = client.put(
            f"/api/vendor/orders/{order['id']}", json={"status": "lost"}, headers=vendor_headers
        )

        assert response.status_code == 422

    def test_missing_order_returns_404(self, client, vendor_headers):
        response = client.put(
            f"/api/vendor/orders/{ObjectId()}", json={"status": "shipped"}, headers=vendor_headers
        )

        assert response.status_code == 404
