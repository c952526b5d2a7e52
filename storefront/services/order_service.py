# storefront/services/order_service.py
import hashlib

from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, OrderItemModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthorizationDenied, NotFound, ValidationFailed
from storefront.domain.permissions import Permission, permissions_intersect, require_viewer
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.notification_service import NotificationService
from storefront.services.payment_client import PaymentClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def cart_total(cart: list[CartItemModel]) -> int:
    return sum(ci.item.price * ci.quantity for ci in cart)


def checkout_key(user_id: int, cart: list[CartItemModel], source: str) -> str:
    """
    Ten sam koszyk i ten sam token karty daja ten sam klucz, wiec ponowiony checkout
    nie obciazy karty drugi raz. Nowy token po odrzuceniu karty to nowy klucz.
    """
    lines = ",".join(f"{ci.id}:{ci.item_id}:{ci.quantity}:{ci.item.price}" for ci in cart)
    digest = hashlib.sha256(f"{user_id}|{source}|{lines}".encode("utf-8")).hexdigest()
    return f"checkout-{user_id}-{digest[:32]}"


class OrderService:
    """
    Zamiana koszyka na zamowienie.
    Kolejnosc: charge w Stripe, potem zamowienie + czyszczenie koszyka w jednej transakcji.
    """

    def __init__(
        self,
        db: Session,
        payment_client: PaymentClient,
        notification_service: NotificationService | None = None,
    ):
        self.db = db
        self.repo = OrderRepo(db)
        self.cart_repo = CartRepo(db)
        self.payment_client = payment_client
        self.notification_service = notification_service or NotificationService()

    def create_order(self, viewer: UserModel | None, token: str) -> OrderModel:
        viewer = require_viewer(viewer, "You must be signed in to complete this order")

        # pozycje bez produktu (usuniety w miedzyczasie) nie trafiaja do zamowienia
        cart = [ci for ci in self.cart_repo.get_cart_items(viewer.id) if ci.item is not None]
        if not cart:
            raise ValidationFailed("Your cart is empty")

        amount = cart_total(cart)
        logger.info(f"Checkout uzytkownika {viewer.id}: {len(cart)} pozycji, suma {amount}")

        charge = self.payment_client.charge(
            amount=amount,
            source=token,
            idempotency_key=checkout_key(viewer.id, cart, token),
        )

        order = OrderModel(
            user_id=viewer.id,
            total=charge.amount,
            charge=charge.id,
            items=[
                OrderItemModel(
                    user_id=viewer.id,
                    title=ci.item.title,
                    description=ci.item.description,
                    price=ci.item.price,
                    image=ci.item.image,
                    large_image=ci.item.large_image,
                    quantity=ci.quantity,
                )
                for ci in cart
            ],
        )

        try:
            created = self.repo.create_order_and_clear_cart(order, [ci.id for ci in cart])
        except Exception:
            logger.error(
                f"Charge {charge.id} pobrany ale zamowienie uzytkownika {viewer.id} nie zapisane, "
                f"ponowny checkout uzyje tego samego charge"
            )
            raise

        if viewer in self.db:
            self.db.expire(viewer, ["cart"])
        logger.info(f"Order {created.id} created, charge {charge.id}")

        try:
            self.notification_service.send_order_notification(viewer.email, created.id, created.total)
        except Exception as e:
            # zamowienie juz zapisane, brak maila nie cofa checkoutu
            logger.warning(f"Nie udalo sie zlecic powiadomienia dla order {created.id}: {e}")

        return created

    def get_order(self, viewer: UserModel | None, order_id: int) -> OrderModel:
        viewer = require_viewer(viewer)

        order = self.repo.get_order(order_id)
        if not order:
            raise NotFound(f"No order found for ID {order_id}")

        owns_order = order.user_id == viewer.id
        is_admin = permissions_intersect(viewer.permissions, [Permission.ADMIN])
        if not owns_order and not is_admin:
            raise AuthorizationDenied("You arent allowed to see this")

        return order

    def list_orders(self, viewer: UserModel | None) -> list[OrderModel]:
        viewer = require_viewer(viewer)
        return self.repo.list_orders_for_user(viewer.id)
