# app/domain/enums.py
import enum


class UserRole(str, enum.Enum):
    client = "client"
    admin = "admin"


class UserStatus(str, enum.Enum):
    active = "active"
    deleted = "deleted"


class ProductStatus(str, enum.Enum):
    active = "active"
    deleted = "deleted"


class CartStatus(str, enum.Enum):
    active = "active"
    purchased = "purchased"


class LineItemStatus(str, enum.Enum):
    active = "active"
    removed = "removed"
    purchased = "purchased"


class OrderStatus(str, enum.Enum):
    active = "active"
