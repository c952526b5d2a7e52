# storefront/services/cart_service.py
import uuid

from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthorizationDenied, Conflict, NotFound
from storefront.domain.permissions import require_viewer
from storefront.repos.cart_repo import CartRepo
from storefront.repos.item_repo import ItemRepo
from storefront.services.lock_service import LockService
from storefront.utils.settings import CART_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk to wiersze cart_items uzytkownika, max jeden wiersz na (user, item).
    Unikalnosc pilnowana odczytem przed zapisem pod lockiem w Redis.
    """

    def __init__(self, db: Session, lock_service: LockService):
        self.repo = CartRepo(db)
        self.items = ItemRepo(db)
        self.lock_service = lock_service

    #query
    def get_cart(self, viewer: UserModel | None) -> list[CartItemModel]:
        viewer = require_viewer(viewer)
        return self.repo.get_cart_items(viewer.id)

    #commands
    def add_to_cart(self, viewer: UserModel | None, item_id: int) -> CartItemModel:
        viewer = require_viewer(viewer, "You must be signed in to add to cart!")

        if not self.items.get_item(item_id):
            raise NotFound(f"No item found for ID {item_id}")

        key = LockService.cart_key(viewer.id, item_id)
        owner = uuid.uuid4().hex
        if not self.lock_service.acquire(key, owner, ttl=CART_LOCK_TTL_SECONDS):
            raise Conflict("This item is being added to your cart, try again")

        try:
            existing = self.repo.find_cart_item(viewer.id, item_id)

            if existing:
                logger.info(
                    f"Produkt {item_id} juz jest w koszyku {viewer.id}, zwiekszam ilosc "
                    f"z {existing.quantity} do {existing.quantity + 1}"
                )
                existing.quantity += 1
                return self.repo.save(existing)

            logger.info(f"Dodaje nowy produkt {item_id} do koszyka {viewer.id}")
            return self.repo.save(
                CartItemModel(user_id=viewer.id, item_id=item_id, quantity=1)
            )
        finally:
            self.lock_service.release(key, owner)

    def remove_from_cart(self, viewer: UserModel | None, cart_item_id: int) -> CartItemModel:
        viewer = require_viewer(viewer)

        cart_item = self.repo.get_cart_item(cart_item_id)
        if not cart_item:
            raise NotFound("No cart item found")

        if cart_item.user_id != viewer.id:
            raise AuthorizationDenied("Not yours to delete!")

        self.repo.delete_cart_item(cart_item)
        logger.info(f"Usunieto pozycje {cart_item_id} z koszyka {viewer.id}")
        return cart_item
