from sqlalchemy import Column, Integer, String, BigInteger, JSON
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)
    permissions = Column(JSON, nullable=False, default=list)

    # epoch ms
    reset_token = Column(String, nullable=True, index=True)
    reset_token_expiry = Column(BigInteger, nullable=True)

    cart = relationship(
        "CartItemModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )
