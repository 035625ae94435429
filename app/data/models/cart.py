#app/data/models/cart.py
from sqlalchemy import Column, Integer, ForeignKey, Enum
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models._mixins import TimestampMixin
from app.domain.enums import CartStatus


class CartModel(TimestampMixin, Base):
    __tablename__ = "carts"

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(Enum(CartStatus, native_enum=False, length=20), nullable=False, default=CartStatus.active)

    items = relationship(
        "CartItemModel",
        back_populates="cart",
        cascade="all, delete-orphan",
    )
