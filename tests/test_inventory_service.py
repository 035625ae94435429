"""Tests for the inventory ledger: availability checks and conditional decrements."""

import pytest

from app.domain.enums import ProductStatus
from app.domain.exceptions import InsufficientStockError, NotFoundError
from app.services.inventory_service import InventoryLedger


class TestCheckAvailability:
    def test_returns_product_when_enough_stock(self, db_session, make_product):
        product = make_product(quantity=10)

        found = InventoryLedger(db_session).check_availability(product.id, 10)

        assert found.id == product.id

    def test_missing_product_is_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            InventoryLedger(db_session).check_availability(999, 1)

    def test_deleted_product_is_not_found(self, db_session, make_product):
        product = make_product(status=ProductStatus.deleted)

        with pytest.raises(NotFoundError):
            InventoryLedger(db_session).check_availability(product.id, 1)

    def test_insufficient_reports_available_quantity(self, db_session, make_product):
        product = make_product(quantity=3)

        with pytest.raises(InsufficientStockError) as exc_info:
            InventoryLedger(db_session).check_availability(product.id, 4)

        assert exc_info.value.message == "This product only has 3 items"
        assert exc_info.value.details == {"product_id": product.id, "available": 3, "requested": 4}


class TestDecrement:
    def test_decrements_stock(self, db_session, make_product):
        product = make_product(quantity=10)

        InventoryLedger(db_session).decrement(product.id, 4)
        db_session.commit()

        db_session.refresh(product)
        assert product.quantity_available == 6

    def test_decrement_to_zero_is_allowed(self, db_session, make_product):
        product = make_product(quantity=2)

        InventoryLedger(db_session).decrement(product.id, 2)
        db_session.commit()

        db_session.refresh(product)
        assert product.quantity_available == 0

    def test_decrement_beyond_stock_is_rejected_without_change(self, db_session, make_product):
        product = make_product(quantity=2)

        with pytest.raises(InsufficientStockError) as exc_info:
            InventoryLedger(db_session).decrement(product.id, 3)

        db_session.rollback()
        db_session.refresh(product)
        assert product.quantity_available == 2
        assert exc_info.value.available == 2

    def test_decrement_of_deleted_product_is_not_found(self, db_session, make_product):
        product = make_product(quantity=5, status=ProductStatus.deleted)

        with pytest.raises(NotFoundError) as exc_info:
            InventoryLedger(db_session).decrement(product.id, 1)

        assert exc_info.value.message == "Cant find the product with the given ID"

    def test_decrement_of_missing_product_is_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            InventoryLedger(db_session).decrement(999, 1)
