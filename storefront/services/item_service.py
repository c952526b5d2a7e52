# storefront/services/item_service.py
from sqlalchemy.orm import Session

from storefront.data.models.item import ItemModel
from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthorizationDenied, NotFound
from storefront.domain.permissions import Permission, permissions_intersect, require_viewer
from storefront.repos.item_repo import ItemRepo
from storefront.utils.settings import ITEMS_PER_PAGE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# ktore uprawnienia pozwalaja edytowac cudzy produkt
_ITEM_POLICY = {
    "update": (Permission.ADMIN, Permission.ITEMUPDATE),
    "delete": (Permission.ADMIN, Permission.ITEMDELETE),
}


def authorize_item_action(viewer: UserModel, item: ItemModel, action: str) -> None:
    if item.user_id == viewer.id:
        return
    if permissions_intersect(viewer.permissions, _ITEM_POLICY[action]):
        return
    raise AuthorizationDenied("You cannot do that")


class ItemService:
    def __init__(self, db: Session):
        self.repo = ItemRepo(db)

    #query
    def list_items(self, skip: int = 0, first: int | None = None) -> list[ItemModel]:
        return self.repo.list_items(skip=skip, first=first or ITEMS_PER_PAGE)

    def count_items(self) -> dict:
        return {"count": self.repo.count_items()}

    def get_item(self, item_id: int) -> ItemModel:
        item = self.repo.get_item(item_id)
        if not item:
            raise NotFound(f"No item found for ID {item_id}")
        return item

    #commands
    def create_item(self, viewer: UserModel | None, data: dict) -> ItemModel:
        viewer = require_viewer(viewer)
        item = self.repo.save(ItemModel(user_id=viewer.id, **data))
        logger.info(f"Uzytkownik {viewer.id} utworzyl produkt {item.id}")
        return item

    def update_item(self, viewer: UserModel | None, item_id: int, updates: dict) -> ItemModel:
        viewer = require_viewer(viewer)
        item = self.get_item(item_id)
        authorize_item_action(viewer, item, "update")

        updates.pop("id", None)
        for field, value in updates.items():
            setattr(item, field, value)

        item = self.repo.save(item)
        logger.info(f"Produkt {item.id} zaktualizowany przez {viewer.id}")
        return item

    def delete_item(self, viewer: UserModel | None, item_id: int) -> ItemModel:
        viewer = require_viewer(viewer)
        item = self.get_item(item_id)
        authorize_item_action(viewer, item, "delete")

        self.repo.delete(item)
        logger.info(f"Produkt {item_id} usuniety przez {viewer.id}")
        return item
