# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal, init_db
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.domain.enums import ProductStatus, UserRole
from app.utils.security import hash_password
from app.utils.logging import get_logger

logger = get_logger(__name__)

PRODUCTS = [
    {"batch_number": 1, "name": "Tv Sony", "price": Decimal("1000.00"), "quantity_available": 10},
    {"batch_number": 2, "name": "Tv Samsung", "price": Decimal("1200.00"), "quantity_available": 15},
    {"batch_number": 3, "name": "Keyboard", "price": Decimal("199.99"), "quantity_available": 30},
]


def seed(session_factory=SessionLocal):
    db = session_factory()
    try:
        # only seed if empty
        if db.query(UserModel).first():
            return

        admin = UserModel(
            username="admin",
            email="admin@shop.local",
            password_hash=hash_password("admin"),
            role=UserRole.admin,
        )
        db.add(admin)
        db.flush()

        for data in PRODUCTS:
            db.add(ProductModel(status=ProductStatus.active, user_id=admin.id, **data))
        db.commit()
        logger.info(f"Seeded admin {admin.id} and {len(PRODUCTS)} products")
    finally:
        db.close()


if __name__ == "__main__":
    init_db()
    seed()
