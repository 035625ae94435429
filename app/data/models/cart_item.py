from sqlalchemy import Column, Integer, ForeignKey, Enum, UniqueConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models._mixins import TimestampMixin
from app.domain.enums import LineItemStatus


class CartItemModel(TimestampMixin, Base):
    """Line item: one product in one cart. Never hard-deleted."""

    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    status = Column(Enum(LineItemStatus, native_enum=False, length=20), nullable=False, default=LineItemStatus.active)

    cart = relationship("CartModel", back_populates="items")
    product = relationship("ProductModel", lazy="joined")

    __table_args__ = (UniqueConstraint("cart_id", "product_id", name="u_cart_product"),)
