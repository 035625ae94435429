# app/api/deps.py
from functools import lru_cache

import redis
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.enums import UserRole
from app.domain.exceptions import UnauthorizedError, ForbiddenError
from app.repos.user_repo import UserRepo
from app.services.lock_service import LockService
from app.services.session_service import SessionService
from app.utils.settings import REDIS_URL

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_redis() -> redis.Redis:
    return redis.Redis.from_url(REDIS_URL, decode_responses=True)


def get_lock_service(client: redis.Redis = Depends(get_redis)) -> LockService:
    return LockService(client=client)


def get_session_service(client: redis.Redis = Depends(get_redis)) -> SessionService:
    return SessionService(client=client)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    sessions: SessionService = Depends(get_session_service),
) -> UserModel:
    if credentials is None:
        raise UnauthorizedError("Invalid session")

    user_id = sessions.resolve(credentials.credentials)
    if user_id is None:
        raise UnauthorizedError("Invalid session")

    # usuniety (soft delete) uzytkownik nie ma juz sesji
    user = UserRepo(db).get_active_user(user_id)
    if not user:
        raise UnauthorizedError("Invalid session")

    return user


def require_admin(current_user: UserModel = Depends(get_current_user)) -> UserModel:
    if current_user.role != UserRole.admin:
        raise ForbiddenError("Access denied")
    return current_user


def protect_account_owner(
    user_id: int,
    current_user: UserModel = Depends(get_current_user),
) -> UserModel:
    if current_user.id != user_id:
        raise ForbiddenError("You cant update others users accounts")
    return current_user
