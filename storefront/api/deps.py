# storefront/api/deps.py
from fastapi import Cookie, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.data.models.user import UserModel
from storefront.repos.user_repo import UserRepo
from storefront.services.lock_service import LockService
from storefront.services.mail_client import MailClient
from storefront.services.notification_service import NotificationService
from storefront.services.payment_client import PaymentClient
from storefront.services.session import read_token
from storefront.utils.settings import SESSION_COOKIE_NAME


def get_viewer(
    token: str | None = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    db: Session = Depends(get_db),
) -> UserModel | None:
    """Uzytkownik z cookie sesji albo None, przekazywany jawnie do serwisow."""
    user_id = read_token(token)
    if user_id is None:
        return None
    return UserRepo(db).get_user(user_id)


def get_lock_service() -> LockService:
    return LockService()


def get_payment_client() -> PaymentClient:
    return PaymentClient()


def get_mail_client() -> MailClient:
    return MailClient()


def get_notification_service() -> NotificationService:
    return NotificationService()
