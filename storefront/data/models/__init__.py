#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from storefront.data.models.user import UserModel
from storefront.data.models.item import ItemModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, OrderItemModel

__all__ = ["UserModel", "ItemModel", "CartItemModel", "OrderModel", "OrderItemModel"]
