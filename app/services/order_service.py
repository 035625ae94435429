# app/services/order_service.py
from typing import Dict, Any

from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.data.models.user import UserModel
from app.domain.enums import LineItemStatus, OrderStatus, UserRole
from app.domain.exceptions import NotFoundError, ForbiddenError
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.services.cart_service import line_item_to_dict


class OrderService:
    """
    Historia zamowien - tylko odczyt.
    Zamowienia tworzy wylacznie PurchaseService.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)

    def _to_dict(self, order: OrderModel) -> Dict[str, Any]:
        items = self.cart_repo.get_cart_items(order.cart_id, LineItemStatus.purchased)
        return {
            "id": order.id,
            "user_id": order.user_id,
            "cart_id": order.cart_id,
            "status": order.status,
            "issued_at": order.issued_at,
            "total_price": order.total_price,
            "created_at": order.created_at,
            "items": [line_item_to_dict(i) for i in items],
        }

    def list_all_orders(self) -> list[Dict[str, Any]]:
        return [self._to_dict(o) for o in self.repo.list_orders()]

    def list_own_orders(self, user_id: int) -> list[Dict[str, Any]]:
        return [self._to_dict(o) for o in self.repo.list_orders(user_id=user_id)]

    def get_order(self, order_id: int, current_user: UserModel) -> Dict[str, Any]:
        order = self.repo.get_order(order_id)

        if not order or order.status != OrderStatus.active:
            raise NotFoundError("No order found with that id", details={"order_id": order_id})

        if order.user_id != current_user.id and current_user.role != UserRole.admin:
            raise ForbiddenError(
                "You are not the owner of this order",
                details={"order_id": order_id},
            )

        return self._to_dict(order)
