#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.user import UserModel
from app.data.models.vendor import VendorModel
from app.data.models.item import ItemModel
from app.data.models.cart import CartModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.data.models.table import TableModel

__all__ = [
    "UserModel",
    "VendorModel",
    "ItemModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
    "TableModel",
]
