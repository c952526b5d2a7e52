# storefront/services/auth_service.py
import secrets
import time
from dataclasses import dataclass

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthenticationFailed, NotFound, ValidationFailed
from storefront.repos.user_repo import UserRepo
from storefront.services.mail_client import MailClient, make_a_nice_email
from storefront.services.session import issue_token
from storefront.utils.settings import (
    BCRYPT_ROUNDS,
    DEFAULT_PERMISSIONS,
    FRONTEND_URL,
    RESET_TOKEN_TTL_MS,
)
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AuthResult:
    user: UserModel
    token: str


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


def _now_ms() -> int:
    return int(time.time() * 1000)


class AuthService:
    """
    Use case'y logowania: signup, signin, reset hasla.
    Serwis nie dotyka cookie, zwraca token a router ustawia go w odpowiedzi.
    """

    def __init__(self, db: Session, mail_client: MailClient | None = None):
        self.repo = UserRepo(db)
        self.mail_client = mail_client or MailClient()

    def signup(self, email: str, password: str, name: str) -> AuthResult:
        email = email.lower()

        if self.repo.get_by_email(email):
            raise ValidationFailed(f"A user with email {email} already exists")

        try:
            user = self.repo.create_user(
                UserModel(
                    name=name,
                    email=email,
                    password=hash_password(password),
                    permissions=list(DEFAULT_PERMISSIONS),
                )
            )
        except IntegrityError:
            # rownolegla rejestracja tym samym mailem, unique index odrzucil drugi insert
            raise ValidationFailed(f"A user with email {email} already exists")
        logger.info(f"Utworzono uzytkownika {user.id}")
        return AuthResult(user=user, token=issue_token(user.id))

    def signin(self, email: str, password: str) -> AuthResult:
        user = self.repo.get_by_email(email.lower())
        if not user:
            raise AuthenticationFailed(f"No such user found for email: {email}")

        if not check_password(password, user.password):
            logger.info(f"Nieudane logowanie uzytkownika {user.id}")
            raise AuthenticationFailed("Invalid password!")

        return AuthResult(user=user, token=issue_token(user.id))

    def request_reset(self, email: str) -> None:
        user = self.repo.get_by_email(email.lower())
        if not user:
            raise NotFound(f"No such user found for email: {email}")

        #poprzedni token jest nadpisywany
        reset_token = secrets.token_hex(20)
        user.reset_token = reset_token
        user.reset_token_expiry = _now_ms() + RESET_TOKEN_TTL_MS
        self.repo.save(user)

        link = f"{FRONTEND_URL.rstrip('/')}/reset?resetToken={reset_token}"
        self.mail_client.send(
            to=user.email,
            subject="Your Password Reset Token",
            html=make_a_nice_email(
                f'Your Password Reset Token is here!<br/><br/><a href="{link}">Click Here to Reset</a>'
            ),
        )
        logger.info(f"Wyslano link resetu hasla dla uzytkownika {user.id}")

    def reset_password(self, password: str, confirm_password: str, reset_token: str) -> AuthResult:
        if password != confirm_password:
            raise ValidationFailed("Passwords don't match!")

        user = self.repo.get_by_reset_token(reset_token, min_expiry=_now_ms())
        if not user:
            raise ValidationFailed("This token is either invalid or expired")

        user.password = hash_password(password)
        user.reset_token = None
        user.reset_token_expiry = None
        user = self.repo.save(user)

        logger.info(f"Zmieniono haslo uzytkownika {user.id}")
        return AuthResult(user=user, token=issue_token(user.id))
