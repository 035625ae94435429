from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, get_session_service, protect_account_owner
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import UserCreate, UserRead, UserUpdate, LoginIn, TokenOut
from app.services.session_service import SessionService
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def signup(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
):
    token = UserService(db, session_service=sessions).login(payload.email, payload.password)
    return {"token": token}


@router.get("", response_model=List[UserRead])
def get_all_users(
    _user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserService(db).list_users()


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    _user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return UserService(db).get_user(user_id)


@router.patch("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_user(
    payload: UserUpdate,
    owner: UserModel = Depends(protect_account_owner),
    db: Session = Depends(get_db),
):
    UserService(db).update_user(owner, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    owner: UserModel = Depends(protect_account_owner),
    db: Session = Depends(get_db),
):
    UserService(db).delete_user(owner)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
