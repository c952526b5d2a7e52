# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.services.mail_client import MailClient, make_a_nice_email
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Powiadomienia po zlozeniu zamowienia.
    Wysylka idzie przez Celery, checkout nie czeka na maila.
    """

    @staticmethod
    def send_order_notification(email: str, order_id: int, total: int):
        send_order_confirmation_task.delay(email, order_id, total)


def format_amount(cents: int) -> str:
    return f"${cents / 100:,.2f}"


@celery_app.task(name="storefront.services.notification_service.send_order_confirmation_task")
def send_order_confirmation_task(email: str, order_id: int, total: int):
    logger.info(f"[NOTIFICATION] Order {order_id}: wysylka potwierdzenia")
    client = MailClient()
    client.send(
        to=email,
        subject=f"Your order {order_id} is confirmed",
        html=make_a_nice_email(
            f"Thanks for your order! Order {order_id} was charged {format_amount(total)}."
        ),
    )
    return {"order_id": order_id, "status": "sent"}
