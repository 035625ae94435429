# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import require_admin
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import ProductCreate, ProductUpdate, ProductOut
from app.services.catalog_service import CatalogService

# caly katalog tylko dla admina
router = APIRouter(prefix="/products", tags=["products"], dependencies=[Depends(require_admin)])


@router.post("/create-product", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
def create_product(
    payload: ProductCreate,
    admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    return CatalogService(db).create_product(payload, admin.id)


@router.get("", response_model=List[ProductOut])
def get_all_products(db: Session = Depends(get_db)):
    return CatalogService(db).list_products()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return CatalogService(db).get_product(product_id)


@router.patch("/update-product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(product_id: int, payload: ProductUpdate, db: Session = Depends(get_db)):
    CatalogService(db).update_product(product_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/delete-product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    CatalogService(db).delete_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
