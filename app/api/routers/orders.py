# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import OrderOut
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("", response_model=List[OrderOut])
def get_all_orders(
    _admin: UserModel = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Wszystkie zamowienia - tylko admin."""
    return get_service(db).list_all_orders()


# musi byc przed /{order_id}
@router.get("/get-all-own-orders", response_model=List[OrderOut])
def get_all_own_orders(
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).list_own_orders(current_user.id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    current_user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Szczegoly zamowienia razem z kupionymi pozycjami.
    Wlasciciel albo admin.
    """
    return get_service(db).get_order(order_id, current_user)
