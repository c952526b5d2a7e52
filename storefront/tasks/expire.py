# storefront/tasks/expire.py
import time

from storefront.celery_worker import celery_app
from storefront.data.database import SessionLocal
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def expire_reset_tokens(db, now_ms: int | None = None) -> int:
    now_ms = now_ms if now_ms is not None else int(time.time() * 1000)
    cleared = UserRepo(db).clear_expired_reset_tokens(now_ms)
    logger.info(f"Wyczyszczono {cleared} wygaslych tokenow resetu hasla")
    return cleared


@celery_app.task(name="storefront.tasks.expire.expire_reset_tokens_task")
def expire_reset_tokens_task():
    logger.info("Expire reset tokens task started")

    db = SessionLocal()
    try:
        return expire_reset_tokens(db)
    finally:
        db.close()
