"""Integration tests for the /cart endpoints via TestClient."""

from decimal import Decimal

import pytest
from sqlalchemy import select

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.enums import LineItemStatus


@pytest.fixture
def headers(auth_headers, user):
    return auth_headers(user)


def _add(client, headers, product_id, quantity):
    return client.post(
        "/cart/add-product",
        json={"productId": product_id, "quantity": quantity},
        headers=headers,
    )


class TestAuthentication:
    def test_missing_token_is_unauthorized(self, client):
        response = client.get("/cart")

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid session"

    def test_unknown_token_is_unauthorized(self, client):
        response = client.get("/cart", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401


class TestAddProductEndpoint:
    def test_first_add_creates_cart(self, client, db_session, headers, user, make_product):
        product = make_product(quantity=10)

        response = _add(client, headers, product.id, 3)

        assert response.status_code == 201
        body = response.json()
        assert body["product_id"] == product.id
        assert body["quantity"] == 3
        assert body["status"] == "active"

        carts = db_session.execute(select(CartModel).where(CartModel.user_id == user.id)).scalars().all()
        assert len(carts) == 1

        cart = client.get("/cart", headers=headers)
        assert cart.status_code == 200
        [item] = cart.json()["items"]
        assert item["product"]["id"] == product.id
        assert item["quantity"] == 3

    def test_snake_case_body_is_accepted(self, client, headers, make_product):
        product = make_product()

        response = client.post(
            "/cart/add-product",
            json={"product_id": product.id, "quantity": 1},
            headers=headers,
        )

        assert response.status_code == 201

    def test_unknown_product_is_404(self, client, headers):
        response = _add(client, headers, 999, 1)

        assert response.status_code == 404

    def test_insufficient_quantity_is_400(self, client, headers, make_product):
        product = make_product(quantity=2)

        response = _add(client, headers, product.id, 5)

        assert response.status_code == 400
        assert response.json()["message"] == "This product only has 2 items"
        assert response.json()["details"]["available"] == 2

    def test_already_in_cart_is_400(self, client, headers, make_product):
        product = make_product()
        _add(client, headers, product.id, 1)

        response = _add(client, headers, product.id, 1)

        assert response.status_code == 400
        assert response.json()["message"] == "This product is already in the cart"

    def test_zero_quantity_is_rejected_by_validation(self, client, headers, make_product):
        product = make_product()

        response = _add(client, headers, product.id, 0)

        assert response.status_code == 422


class TestUpdateProductEndpoint:
    def test_update_then_zero_leaves_removed_item(self, client, db_session, headers, make_product):
        product = make_product(quantity=10)
        _add(client, headers, product.id, 1)

        first = client.patch("/cart/update-product", json={"productId": product.id, "quantity": 5}, headers=headers)
        second = client.patch("/cart/update-product", json={"productId": product.id, "quantity": 0}, headers=headers)

        assert first.status_code == 204
        assert second.status_code == 204
        [item] = db_session.execute(select(CartItemModel)).scalars().all()
        assert item.status == LineItemStatus.removed
        assert item.quantity == 0

        response = client.delete(f"/cart/{product.id}", headers=headers)
        assert response.status_code == 404
        assert response.json()["message"] == "This product does not exist in this cart"

    def test_without_cart_is_404(self, client, headers, make_product):
        product = make_product()

        response = client.patch("/cart/update-product", json={"productId": product.id, "quantity": 1}, headers=headers)

        assert response.status_code == 404

    def test_insufficient_quantity_is_400(self, client, headers, make_product):
        product = make_product(quantity=3)
        _add(client, headers, product.id, 1)

        response = client.patch("/cart/update-product", json={"productId": product.id, "quantity": 4}, headers=headers)

        assert response.status_code == 400


class TestRemoveProductEndpoint:
    def test_remove_returns_204(self, client, headers, make_product):
        product = make_product()
        _add(client, headers, product.id, 1)

        response = client.delete(f"/cart/{product.id}", headers=headers)

        assert response.status_code == 204
        assert client.get("/cart", headers=headers).json()["items"] == []

    def test_without_cart_is_404(self, client, headers):
        response = client.delete("/cart/1", headers=headers)

        assert response.status_code == 404
        assert response.json()["message"] == "This user does not have a cart yet"


class TestPurchaseEndpoint:
    def test_purchase_returns_purchased_cart(self, client, headers, make_product):
        product_a = make_product(price="100.00", quantity=10)
        product_b = make_product(price="50.00", quantity=1)
        _add(client, headers, product_a.id, 2)
        _add(client, headers, product_b.id, 1)

        response = client.post("/cart/purchase", headers=headers)

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "purchased"
        assert Decimal(body["total_price"]) == Decimal("250")
        assert {i["status"] for i in body["items"]} == {"purchased"}
        assert body["order_id"] > 0

    def test_purchase_without_cart_is_404(self, client, headers):
        response = client.post("/cart/purchase", headers=headers)

        assert response.status_code == 404

    def test_cart_is_gone_after_purchase(self, client, headers, make_product):
        product = make_product()
        _add(client, headers, product.id, 1)
        client.post("/cart/purchase", headers=headers)

        assert client.get("/cart", headers=headers).status_code == 404
        assert client.post("/cart/purchase", headers=headers).status_code == 404

    def test_locked_cart_is_409(self, client, headers, user, fake_redis, make_product):
        product = make_product()
        _add(client, headers, product.id, 1)
        fake_redis.set(f"cart:user:{user.id}:lock", "other-request", ex=10)

        response = client.post("/cart/purchase", headers=headers)

        assert response.status_code == 409
