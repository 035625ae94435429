from sqlalchemy import Column, Integer, ForeignKey, DateTime, Numeric, Enum
from sqlalchemy.orm import relationship

from app.data.database import Base
from app.data.models._mixins import TimestampMixin
from app.domain.enums import OrderStatus


class OrderModel(TimestampMixin, Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True)
    cart_id = Column(Integer, ForeignKey("carts.id"), nullable=False, unique=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    status = Column(Enum(OrderStatus, native_enum=False, length=20), nullable=False, default=OrderStatus.active)
    total_price = Column(Numeric(12, 2), nullable=False)
    issued_at = Column(DateTime(timezone=True), nullable=False)

    # tylko do odczytu - historia zakupu
    cart = relationship("CartModel", viewonly=True)
