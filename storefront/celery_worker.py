# storefront/celery_worker.py
from celery import Celery

from storefront.utils.settings import CELERY_BROKER_URL, CELERY_RESULT_BACKEND

celery_app = Celery(
    "storefront",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# taski importowane jawnie, zeby worker je zarejestrowal
celery_app.conf.imports = (
    "storefront.tasks.expire",
    "storefront.services.notification_service",
)

celery_app.conf.beat_schedule = {
    "expire-reset-tokens-every-10-minutes": {
        "task": "storefront.tasks.expire.expire_reset_tokens_task",
        "schedule": 600.0,
    },
}

celery_app.conf.timezone = "UTC"
