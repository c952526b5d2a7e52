from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def get_by_reset_token(self, reset_token: str, min_expiry: int) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(
                UserModel.reset_token == reset_token,
                UserModel.reset_token_expiry >= min_expiry,
            )
        ).scalars().first()

    def list_users(self) -> list[UserModel]:
        return list(self.db.execute(select(UserModel).order_by(UserModel.id)).scalars())

    def create_user(self, user: UserModel) -> UserModel:
        try:
            self.db.add(user)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def save(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def clear_expired_reset_tokens(self, now_ms: int) -> int:
        users = self.db.execute(
            select(UserModel).where(
                UserModel.reset_token.is_not(None),
                UserModel.reset_token_expiry < now_ms,
            )
        ).scalars().all()
        for user in users:
            user.reset_token = None
            user.reset_token_expiry = None
        self.db.commit()
        return len(users)
