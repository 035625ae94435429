# app/services/inventory_service.py
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.enums import ProductStatus
from app.domain.exceptions import NotFoundError, InsufficientStockError
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class InventoryLedger:
    """
    Stan magazynu produktow.
    Nie robi commit - transakcja nalezy do wywolujacego.
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def check_availability(self, product_id: int, requested_qty: int) -> ProductModel:
        product = self.repo.get_active_product(product_id)

        if not product:
            raise NotFoundError(
                "Cant find the product with the given ID",
                details={"product_id": product_id},
            )

        if requested_qty > product.quantity_available:
            raise InsufficientStockError(
                product_id=product_id,
                available=product.quantity_available,
                requested=requested_qty,
            )

        return product

    def decrement(self, product_id: int, qty: int) -> None:
        rowcount = self.repo.decrement_quantity(product_id, qty)

        if rowcount == 0:
            # ponowny odczyt tylko po to, zeby zglosic aktualny stan
            product = self.repo.get_product(product_id, refresh=True)
            if not product or product.status == ProductStatus.deleted:
                logger.warning(f"Stock decrement rejected for product {product_id}: product deleted")
                raise NotFoundError(
                    "Cant find the product with the given ID",
                    details={"product_id": product_id},
                )

            available = product.quantity_available
            logger.warning(
                f"Stock decrement rejected for product {product_id}: "
                f"requested {qty}, available {available}"
            )
            raise InsufficientStockError(
                product_id=product_id,
                available=available,
                requested=qty,
            )

        logger.info(f"Product {product_id} stock decremented by {qty}")
