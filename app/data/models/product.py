from sqlalchemy import Column, Integer, ForeignKey, String, Numeric, Enum, CheckConstraint

from app.data.database import Base
from app.data.models._mixins import TimestampMixin
from app.domain.enums import ProductStatus


class ProductModel(TimestampMixin, Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    batch_number = Column(Integer, nullable=False)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    quantity_available = Column(Integer, nullable=False, default=0)

    status = Column(Enum(ProductStatus, native_enum=False, length=20), nullable=False, default=ProductStatus.active)
    # admin, ktory dodal produkt
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    __table_args__ = (
        CheckConstraint("quantity_available >= 0", name="check_quantity_available_non_negative"),
    )
