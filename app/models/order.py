"""Order models"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List, Any
from enum import Enum
from app.models.common import ShippingInfo


class OrderStatus(str, Enum):
    """Order status enumeration"""
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(str, Enum):
    """Payment method enumeration"""
    COD = "cod"
    UPI = "upi"
    CARD = "card"

    @property
    def initial_status(self) -> OrderStatus:
        """Cash on delivery starts pending; prepaid orders go straight to processing"""
        if self is PaymentMethod.COD:
            return OrderStatus.PENDING
        return OrderStatus.PROCESSING


# Statuses from which the customer may still cancel
CUSTOMER_CANCELLABLE = {OrderStatus.PENDING, OrderStatus.PROCESSING}


class OrderItem(BaseModel):
    """Order line with the unit price captured at checkout"""
    product_id: Any
    name: str
    image: Optional[str] = None
    quantity: int = Field(ge=1)
    price: float = Field(ge=0)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Order(BaseModel):
    """Order document as stored in the orders collection"""
    id: Optional[str] = Field(None, alias="_id")
    user_id: Any
    items: List[OrderItem]
    total: float = Field(ge=0)
    shipping_info: ShippingInfo
    payment_method: PaymentMethod
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        populate_by_name = True

    def to_document(self) -> dict:
        """Dictionary ready for insert_one, enums stored as plain strings"""
        document = self.model_dump(mode="python", exclude={"id"})
        document["payment_method"] = self.payment_method.value
        document["status"] = self.status.value
        return document
