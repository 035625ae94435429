# app/services/purchase_service.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, Any

from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.domain.enums import CartStatus, LineItemStatus, OrderStatus
from app.domain.exceptions import NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.cart_service import NO_CART_MESSAGE, cart_to_dict
from app.services.inventory_service import InventoryLedger
from app.services.lock_service import LockService
from app.services.notification_service import NotificationService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class PurchaseService:
    """
    Zamiana aktywnego koszyka w zamowienie.

    1. wczytaj aktywny koszyk z aktywnymi pozycjami i produktami
    2. kazda pozycja -> purchased, suma price * quantity, atomowy decrement magazynu
    3. koszyk -> purchased
    4. nowe zamowienie z suma i czasem wystawienia
    Wszystko w jednej transakcji: blad w dowolnym kroku = rollback calosci.
    """

    def __init__(
        self,
        db: Session,
        lock_service: LockService,
        notification_service: NotificationService | None = None,
    ):
        self.cart_repo = CartRepo(db)
        self.order_repo = OrderRepo(db)
        self.ledger = InventoryLedger(db)
        self.lock_service = lock_service
        self.notification_service = notification_service or NotificationService()

    def purchase(self, user_id: int) -> Dict[str, Any]:
        issued_at = datetime.now(timezone.utc)

        with self.lock_service.cart_lock(user_id):
            try:
                cart = self.cart_repo.get_active_cart_by_user(user_id)
                if not cart:
                    raise NotFoundError(NO_CART_MESSAGE, details={"user_id": user_id})

                items = self.cart_repo.get_cart_items(cart.id, LineItemStatus.active)

                total = Decimal("0.00")
                # pozycje sa od siebie niezalezne, kolejnosc nie ma znaczenia
                for item in items:
                    item.status = LineItemStatus.purchased
                    total += item.product.price * item.quantity
                    self.ledger.decrement(item.product_id, item.quantity)

                if not items:
                    logger.warning(f"Purchasing empty cart {cart.id} of user {user_id}")

                cart.status = CartStatus.purchased

                order = self.order_repo.create_order(
                    OrderModel(
                        user_id=user_id,
                        cart_id=cart.id,
                        issued_at=issued_at,
                        total_price=total,
                        status=OrderStatus.active,
                    )
                )

                self.cart_repo.commit()
            except Exception:
                self.cart_repo.rollback()
                raise

        logger.info(
            f"Cart {cart.id} purchased by user {user_id}: order {order.id}, "
            f"{len(items)} line items, total {total}"
        )

        self.notification_service.send_order_notification(user_id, order.id, total)

        snapshot = cart_to_dict(cart, items)
        snapshot["order_id"] = order.id
        return snapshot
