# storefront/repos/cart_repo.py
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, joinedload

from storefront.data.models.cart_item import CartItemModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_item(self, cart_item_id: int) -> CartItemModel | None:
        return self.db.get(CartItemModel, cart_item_id, options=[joinedload(CartItemModel.item)])

    def find_cart_item(self, user_id: int, item_id: int) -> CartItemModel | None:
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.user_id == user_id,
                CartItemModel.item_id == item_id,
            )
        ).scalars().first()

    def get_cart_items(self, user_id: int) -> list[CartItemModel]:
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.user_id == user_id)
                .order_by(CartItemModel.id)
            ).scalars()
        )

    def save(self, cart_item: CartItemModel) -> CartItemModel:
        self.db.add(cart_item)
        self.db.commit()
        self.db.refresh(cart_item)
        return cart_item

    def delete_cart_item(self, cart_item: CartItemModel) -> None:
        self.db.delete(cart_item)
        self.db.commit()

    def delete_many(self, cart_item_ids: list[int]) -> int:
        #bez commita, wywolujacy zamyka transakcje
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.id.in_(cart_item_ids))
        )
        return result.rowcount
