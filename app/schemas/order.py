"""Order schemas"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from app.models.order import OrderStatus, PaymentMethod
from app.models.common import ShippingInfo


class OrderItemInput(BaseModel):
    """Input schema for an order line"""
    product_id: str
    quantity: int = Field(ge=1)

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": "507f1f77bcf86cd799439011",
                "quantity": 2
            }
        }


class OrderCreate(BaseModel):
    """Schema for placing an order"""
    items: List[OrderItemInput] = Field(min_length=1)
    shipping_info: ShippingInfo
    payment_method: PaymentMethod
    total: Optional[float] = Field(None, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "items": [
                    {"product_id": "507f1f77bcf86cd799439011", "quantity": 2}
                ],
                "shipping_info": {
                    "full_name": "Asha Rao",
                    "email": "asha@example.com",
                    "phone": "+919876543210",
                    "address": "12 MG Road",
                    "city": "Bengaluru",
                    "state": "Karnataka",
                    "zip_code": "560001"
                },
                "payment_method": "cod",
                "total": 59.98
            }
        }


class OrderStatusUpdate(BaseModel):
    """Schema for changing an order's status"""
    status: OrderStatus

    class Config:
        json_schema_extra = {
            "example": {
                "status": "shipped"
            }
        }


class OrderItemResponse(BaseModel):
    """Response schema for an order line"""
    product_id: str
    name: str
    image: Optional[str] = None
    category: Optional[str] = None
    quantity: int
    price: float
    subtotal: float


class OrderCustomer(BaseModel):
    """Customer summary shown to vendors"""
    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class OrderResponse(BaseModel):
    """Schema for order response"""
    id: str
    user_id: str
    customer: Optional[OrderCustomer] = None
    items: List[OrderItemResponse]
    total: float
    shipping_info: ShippingInfo
    payment_method: PaymentMethod
    status: OrderStatus
    created_at: datetime
    updated_at: datetime
