# app/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.domain.enums import CartStatus, LineItemStatus


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_active_cart_by_user(self, user_id: int) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(
                CartModel.user_id == user_id,
                CartModel.status == CartStatus.active,
            )
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_item(self, cart_id: int, product_id: int) -> CartItemModel | None:
        # bez filtra statusu - wiersz removed tez sie liczy (reaktywacja)
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def get_active_cart_item(self, cart_id: int, product_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.cart_id == cart_id,
                CartItemModel.product_id == product_id,
                CartItemModel.status == LineItemStatus.active,
            )
        ).scalar_one_or_none()

    def get_cart_items(self, cart_id: int, status: LineItemStatus) -> list[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(
                    CartItemModel.cart_id == cart_id,
                    CartItemModel.status == status,
                )
                .order_by(CartItemModel.id)
            ).scalars().all()
        )

    def add_cart_item(self, item: CartItemModel) -> CartItemModel:
        self.db.add(item)
        self.db.flush()
        return item

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
