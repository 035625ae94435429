# app/repos/product_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.enums import ProductStatus


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_active_product(self, product_id: int, refresh: bool = False) -> ProductModel | None:
        stmt = select(ProductModel).where(
            ProductModel.id == product_id,
            ProductModel.status == ProductStatus.active,
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_product(self, product_id: int, refresh: bool = False) -> ProductModel | None:
        # bez filtra statusu - rowniez usuniete
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_active_products(self) -> list[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.status == ProductStatus.active)
                .order_by(ProductModel.id)
            ).scalars().all()
        )

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def save(self, product: ProductModel) -> ProductModel:
        self.db.commit()
        self.db.refresh(product)
        return product

    def decrement_quantity(self, product_id: int, quantity: int) -> int:
        # jedno zapytanie: update ... where quantity_available >= :qty
        # 0 rows affected = brak towaru (albo produkt usuniety)
        result = self.db.execute(
            update(ProductModel)
            .where(
                ProductModel.id == product_id,
                ProductModel.status == ProductStatus.active,
                ProductModel.quantity_available >= quantity,
            )
            .values(quantity_available=ProductModel.quantity_available - quantity)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount:
            # obiekt w sesji ma stara ilosc - odswiez tylko to pole
            product = self.db.get(ProductModel, product_id)
            self.db.refresh(product, attribute_names=["quantity_available"])
        return result.rowcount
