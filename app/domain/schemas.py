# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime

from app.domain.enums import (
    CartStatus,
    LineItemStatus,
    OrderStatus,
    ProductStatus,
    UserRole,
    UserStatus,
)

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------
class UserCreate(BaseModel):
    """Schema dla rejestracji uzytkownika."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
    password_confirm: str = Field(..., min_length=1, alias="passwordConfirm")


class UserUpdate(BaseModel):
    username: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=255, pattern=EMAIL_PATTERN)


class LoginIn(BaseModel):
    email: str
    password: str


class TokenOut(BaseModel):
    token: str


class UserRead(BaseModel):
    """Schema dla uzytkownika (response) - bez hasla."""

    id: int
    username: str
    email: str
    role: UserRole
    status: UserStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    batch_number: int = Field(..., gt=0, alias="batchNumber")
    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    quantity_available: int = Field(..., ge=0, alias="quantityAvailable")


class ProductUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    batch_number: int | None = Field(None, gt=0, alias="batchNumber")
    name: str | None = Field(None, min_length=1, max_length=200)
    price: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    quantity_available: int | None = Field(None, ge=0, alias="quantityAvailable")


class ProductOut(BaseModel):
    id: int
    batch_number: int
    name: str
    price: Decimal
    quantity_available: int
    status: ProductStatus

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddProductIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., gt=0, alias="productId")
    quantity: int = Field(..., gt=0, description="Ilosc produktu (musi byc > 0)")


class UpdateProductIn(BaseModel):
    """quantity = 0 usuwa pozycje z koszyka."""

    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., gt=0, alias="productId")
    quantity: int = Field(..., ge=0)


class LineItemOut(BaseModel):
    id: int
    cart_id: int
    product_id: int
    quantity: int
    status: LineItemStatus
    created_at: datetime
    updated_at: datetime
    product: ProductOut


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    user_id: int
    status: CartStatus
    created_at: datetime
    updated_at: datetime
    items: List[LineItemOut]
    total_price: Decimal


class PurchaseOut(CartOut):
    order_id: int


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderOut(BaseModel):
    """Schema dla zamowienia (response)."""

    id: int
    user_id: int
    cart_id: int
    status: OrderStatus
    issued_at: datetime
    total_price: Decimal
    created_at: datetime
    items: List[LineItemOut]
