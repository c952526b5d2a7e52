from sqlalchemy import Column, Integer, ForeignKey
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    # brak unique constraint na (user_id, item_id), pilnuje tego CartService
    item_id = Column(Integer, ForeignKey("items.id", ondelete="CASCADE"), nullable=False)

    user = relationship("UserModel", back_populates="cart")
    item = relationship("ItemModel")
