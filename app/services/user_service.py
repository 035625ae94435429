from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.enums import UserRole, UserStatus
from app.domain.exceptions import NotFoundError, ValidationError, ConflictError
from app.domain.schemas import UserCreate, UserUpdate
from app.repos.user_repo import UserRepo
from app.services.session_service import SessionService
from app.utils.security import hash_password, verify_password
from app.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Credentials are invalid"


class UserService:
    def __init__(self, db: Session, session_service: SessionService | None = None):
        self.repo = UserRepo(db)
        self.session_service = session_service

    def create_user(self, payload: UserCreate) -> UserModel:
        if payload.password != payload.password_confirm:
            raise ValidationError("Passwords don't match")

        if self.repo.email_taken(payload.email):
            raise ConflictError("Email already registered", details={"email": payload.email})

        user = UserModel(
            username=payload.username,
            email=payload.email,
            password_hash=hash_password(payload.password),
            role=UserRole.client,
        )
        created = self.repo.create_user(user)
        logger.info(f"User {created.id} signed up with role {created.role.value}")
        return created

    def login(self, email: str, password: str) -> str:
        user = self.repo.get_active_user_by_email(email)

        if not user or not verify_password(password, user.password_hash):
            raise ValidationError(INVALID_CREDENTIALS)

        return self.session_service.create_session(user.id)

    def list_users(self) -> list[UserModel]:
        return self.repo.list_active_users()

    def get_user(self, user_id: int) -> UserModel:
        user = self.repo.get_active_user(user_id)
        if not user:
            raise NotFoundError("Cant find the user with the given ID", details={"user_id": user_id})
        return user

    def update_user(self, user: UserModel, payload: UserUpdate) -> UserModel:
        data = payload.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in data and data["email"] != user.email and self.repo.email_taken(data["email"]):
            raise ConflictError("Email already registered", details={"email": data["email"]})

        for field, value in data.items():
            setattr(user, field, value)
        return self.repo.save(user)

    def delete_user(self, user: UserModel) -> None:
        # soft delete
        user.status = UserStatus.deleted
        self.repo.save(user)
        logger.info(f"User {user.id} deleted")
