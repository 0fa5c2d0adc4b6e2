"""MongoDB models using Pydantic"""

from app.models.common import ShippingInfo
from app.models.user import User, UserRole
from app.models.product import Product
from app.models.order import Order, OrderItem, OrderStatus, PaymentMethod

__all__ = [
    "ShippingInfo",
    "User",
    "UserRole",
    "Product",
    "Order",
    "OrderItem",
    "OrderStatus",
    "PaymentMethod",
]
