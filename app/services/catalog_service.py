# app/services/catalog_service.py
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.enums import ProductStatus
from app.domain.exceptions import NotFoundError
from app.domain.schemas import ProductCreate, ProductUpdate
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Operacje administratora na produktach (CRUD + soft delete)."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def create_product(self, payload: ProductCreate, admin_id: int) -> ProductModel:
        product = ProductModel(
            batch_number=payload.batch_number,
            name=payload.name,
            price=payload.price,
            quantity_available=payload.quantity_available,
            status=ProductStatus.active,
            user_id=admin_id,
        )
        created = self.repo.create_product(product)
        logger.info(f"Product {created.id} created by admin {admin_id}")
        return created

    def list_products(self) -> list[ProductModel]:
        return self.repo.list_active_products()

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_active_product(product_id)
        if not product:
            raise NotFoundError("No product found", details={"product_id": product_id})
        return product

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductModel:
        product = self.get_product(product_id)

        for field, value in payload.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(product, field, value)
        return self.repo.save(product)

    def delete_product(self, product_id: int) -> None:
        product = self.get_product(product_id)
        product.status = ProductStatus.deleted
        self.repo.save(product)
        logger.info(f"Product {product_id} deleted")
