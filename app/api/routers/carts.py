#app/api/routers/carts.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_lock_service
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import (
    AddProductIn,
    UpdateProductIn,
    CartOut,
    LineItemOut,
    PurchaseOut,
)
from app.services.cart_service import CartService
from app.services.lock_service import LockService
from app.services.purchase_service import PurchaseService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session, lock_service: LockService | None = None):
    return CartService(db=db, lock_service=lock_service)


@router.get("", response_model=CartOut)
def get_cart(
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    return svc.get_cart(current_user.id)


@router.post("/add-product", response_model=LineItemOut, status_code=status.HTTP_201_CREATED)
def add_product(
    payload: AddProductIn,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = get_service(db, lock_service)
    return svc.add_line_item(
        user_id=current_user.id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )


@router.patch("/update-product", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    payload: UpdateProductIn,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = get_service(db, lock_service)
    svc.update_line_item(
        user_id=current_user.id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/purchase", response_model=PurchaseOut, status_code=status.HTTP_201_CREATED)
def purchase(
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = PurchaseService(db=db, lock_service=lock_service)
    return svc.purchase(current_user.id)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_product(
    product_id: int,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
    lock_service: LockService = Depends(get_lock_service),
):
    svc = get_service(db, lock_service)
    svc.remove_line_item(current_user.id, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
