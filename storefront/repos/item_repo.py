from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.item import ItemModel


class ItemRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_item(self, item_id: int) -> ItemModel | None:
        return self.db.get(ItemModel, item_id)

    def list_items(self, skip: int, first: int) -> list[ItemModel]:
        stmt = (
            select(ItemModel)
            .order_by(ItemModel.created_at.desc(), ItemModel.id.desc())
            .offset(skip)
            .limit(first)
        )
        return list(self.db.execute(stmt).scalars())

    def count_items(self) -> int:
        return self.db.execute(select(func.count(ItemModel.id))).scalar_one()

    def save(self, item: ItemModel) -> ItemModel:
        try:
            self.db.add(item)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(item)
        return item

    def delete(self, item: ItemModel) -> None:
        self.db.delete(item)
        self.db.commit()
