from decimal import Decimal
from typing import Dict, Any
from sqlalchemy.orm import Session
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.enums import CartStatus, LineItemStatus
from app.domain.exceptions import NotFoundError, AlreadyInCartError
from app.repos.cart_repo import CartRepo
from app.services.inventory_service import InventoryLedger
from app.services.lock_service import LockService
from app.utils.logging import get_logger

logger = get_logger(__name__)

NO_CART_MESSAGE = "This user does not have a cart yet"


def line_item_to_dict(item: CartItemModel) -> Dict[str, Any]:
    product = item.product
    return {
        "id": item.id,
        "cart_id": item.cart_id,
        "product_id": item.product_id,
        "quantity": item.quantity,
        "status": item.status,
        "created_at": item.created_at,
        "updated_at": item.updated_at,
        "product": {
            "id": product.id,
            "batch_number": product.batch_number,
            "name": product.name,
            "price": product.price,
            "quantity_available": product.quantity_available,
            "status": product.status,
        },
    }


def cart_to_dict(cart: CartModel, items: list[CartItemModel]) -> Dict[str, Any]:
    total = sum((i.product.price * i.quantity for i in items), Decimal("0.00"))
    return {
        "id": cart.id,
        "user_id": cart.user_id,
        "status": cart.status,
        "created_at": cart.created_at,
        "updated_at": cart.updated_at,
        "items": [line_item_to_dict(i) for i in items],
        "total_price": total,
    }


class CartService:
    """
    Use case'y dla koszyka uzytkownika.
    commands (add, update, remove) modyfikuja stan, query (get) tylko odczyt.
    Kazda komenda: lock koszyka w redisie, walidacja stanu magazynu, commit albo rollback.
    """

    def __init__(self, db: Session, lock_service: LockService | None = None):
        # lock_service potrzebny tylko dla komend
        self.repo = CartRepo(db)
        self.ledger = InventoryLedger(db)
        self.lock_service = lock_service

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        cart = self.repo.get_active_cart_by_user(user_id)

        if not cart:
            raise NotFoundError(NO_CART_MESSAGE, details={"user_id": user_id})

        items = self.repo.get_cart_items(cart.id, LineItemStatus.active)
        return cart_to_dict(cart, items)

    #commands
    def add_line_item(self, user_id: int, product_id: int, quantity: int) -> Dict[str, Any]:
        with self.lock_service.cart_lock(user_id):
            try:
                self.ledger.check_availability(product_id, quantity)

                cart = self.repo.get_active_cart_by_user(user_id)
                if not cart:
                    cart = self.repo.create_cart(CartModel(user_id=user_id, status=CartStatus.active))
                    logger.info(f"Created cart {cart.id} for user {user_id}")

                item = self.repo.get_cart_item(cart.id, product_id)

                if item and item.status == LineItemStatus.active:
                    raise AlreadyInCartError(cart.id, product_id)

                if item and item.status == LineItemStatus.removed:
                    # ten sam wiersz, nie duplikat
                    item.status = LineItemStatus.active
                    item.quantity = quantity
                    self.repo.add_cart_item(item)
                    logger.info(f"Reactivated line item {item.id} (product {product_id}) in cart {cart.id}")
                else:
                    item = self.repo.add_cart_item(
                        CartItemModel(
                            cart_id=cart.id,
                            product_id=product_id,
                            quantity=quantity,
                            status=LineItemStatus.active,
                        )
                    )
                    logger.info(f"Added product {product_id} x{quantity} to cart {cart.id}")

                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

        return line_item_to_dict(item)

    def update_line_item(self, user_id: int, product_id: int, quantity: int) -> None:
        with self.lock_service.cart_lock(user_id):
            try:
                self.ledger.check_availability(product_id, quantity)

                cart = self.repo.get_active_cart_by_user(user_id)
                if not cart:
                    raise NotFoundError(NO_CART_MESSAGE, details={"user_id": user_id})

                item = self.repo.get_active_cart_item(cart.id, product_id)
                if not item:
                    raise NotFoundError(
                        "Can't update product, is not in the cart yet",
                        details={"cart_id": cart.id, "product_id": product_id},
                    )

                if quantity == 0:
                    item.quantity = 0
                    item.status = LineItemStatus.removed
                    logger.info(f"Line item {item.id} removed from cart {cart.id} (quantity 0)")
                else:
                    logger.info(
                        f"Line item {item.id} quantity {item.quantity} -> {quantity} in cart {cart.id}"
                    )
                    item.quantity = quantity

                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

    def remove_line_item(self, user_id: int, product_id: int) -> None:
        with self.lock_service.cart_lock(user_id):
            try:
                cart = self.repo.get_active_cart_by_user(user_id)
                if not cart:
                    raise NotFoundError(NO_CART_MESSAGE, details={"user_id": user_id})

                item = self.repo.get_active_cart_item(cart.id, product_id)
                if not item:
                    raise NotFoundError(
                        "This product does not exist in this cart",
                        details={"cart_id": cart.id, "product_id": product_id},
                    )

                item.status = LineItemStatus.removed
                item.quantity = 0

                self.repo.commit()
            except Exception:
                self.repo.rollback()
                raise

        logger.info(f"Line item {item.id} (product {product_id}) removed from cart {cart.id}")
