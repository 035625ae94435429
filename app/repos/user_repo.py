from sqlalchemy import select
from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.enums import UserStatus


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_active_user(self, user_id: int) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.id == user_id, UserModel.status == UserStatus.active)
        ).scalar_one_or_none()

    def get_active_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email, UserModel.status == UserStatus.active)
        ).scalar_one_or_none()

    def email_taken(self, email: str) -> bool:
        return self.db.execute(
            select(UserModel.id).where(UserModel.email == email)
        ).first() is not None

    def list_active_users(self) -> list[UserModel]:
        return list(
            self.db.execute(
                select(UserModel).where(UserModel.status == UserStatus.active).order_by(UserModel.id)
            ).scalars().all()
        )

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.commit()
        self.db.refresh(user)
        return user
