# storefront/services/session.py
import jwt

from storefront.utils.settings import APP_SECRET
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_ALGORITHM = "HS256"


def issue_token(user_id: int, secret: str | None = None) -> str:
    return jwt.encode({"userId": user_id}, secret or APP_SECRET, algorithm=_ALGORITHM)


def read_token(token: str | None, secret: str | None = None) -> int | None:
    """Zwraca id uzytkownika z tokena albo None gdy token jest pusty lub niepoprawny."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret or APP_SECRET, algorithms=[_ALGORITHM])
    except jwt.InvalidTokenError as e:
        logger.info(f"Odrzucono token sesji: {e}")
        return None
    user_id = payload.get("userId")
    return user_id if isinstance(user_id, int) else None
