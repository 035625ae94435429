"""
Domain exceptions for the shop service.

Every error a service can report derives from ShopError. The HTTP layer
renders them with a single exception handler using ``status_code``.
"""


class ShopError(Exception):
    """
    Base exception for all shop errors.

    Attributes:
        message: Human-readable error message
        details: Optional dict with additional context (entity IDs, quantities)
    """

    status_code = 400

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.__class__.__name__}('{self.message}', {details_str})"
        return f"{self.__class__.__name__}('{self.message}')"


class NotFoundError(ShopError):
    """Missing product, cart, line item, order or user."""

    status_code = 404


class InsufficientStockError(ShopError):
    """Requested quantity exceeds the quantity available."""

    status_code = 400

    def __init__(self, product_id: int, available: int, requested: int):
        super().__init__(
            f"This product only has {available} items",
            details={"product_id": product_id, "available": available, "requested": requested},
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested


class ConflictError(ShopError):
    status_code = 409


class AlreadyInCartError(ConflictError):
    """Active line item already exists for the (cart, product) pair."""

    status_code = 400

    def __init__(self, cart_id: int, product_id: int):
        super().__init__(
            "This product is already in the cart",
            details={"cart_id": cart_id, "product_id": product_id},
        )


class ForbiddenError(ShopError):
    status_code = 403


class UnauthorizedError(ShopError):
    status_code = 401


class ValidationError(ShopError):
    """Business-rule validation that pydantic cannot express."""

    status_code = 400
