from sqlalchemy import Column, Integer, String, Enum

from app.data.database import Base
from app.data.models._mixins import TimestampMixin
from app.domain.enums import UserRole, UserStatus


class UserModel(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    role = Column(Enum(UserRole, native_enum=False, length=20), nullable=False, default=UserRole.client)
    status = Column(Enum(UserStatus, native_enum=False, length=20), nullable=False, default=UserStatus.active)
