"""Pydantic schemas for request/response validation"""

from app.schemas.common import SuccessResponse, ErrorResponse
from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserProfileResponse,
)
from app.schemas.user import UpdateRoleRequest, UpdateRoleResponse
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)
from app.schemas.order import (
    OrderItemInput,
    OrderCreate,
    OrderStatusUpdate,
    OrderItemResponse,
    OrderCustomer,
    OrderResponse,
)

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserProfileResponse",
    "UpdateRoleRequest",
    "UpdateRoleResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "OrderItemInput",
    "OrderCreate",
    "OrderStatusUpdate",
    "OrderItemResponse",
    "OrderCustomer",
    "OrderResponse",
]
