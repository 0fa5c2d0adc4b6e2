"""Product schemas for CRUD operations"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class ProductCreate(BaseModel):
    """Schema for creating a new product"""
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0)
    category: str = Field(min_length=1)
    image: str = Field(min_length=1)
    stock: int = Field(default=0, ge=0)
    sizes: List[str] = []
    colors: List[str] = []

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Denim Jeans",
                "description": "High-quality denim jeans with perfect fit",
                "price": 79.99,
                "category": "Jeans",
                "image": "https://example.com/jeans.jpg",
                "stock": 30,
                "sizes": ["30", "32", "34"],
                "colors": ["Blue", "Black"]
            }
        }


class ProductUpdate(BaseModel):
    """Schema for updating a product"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    sizes: Optional[List[str]] = None
    colors: Optional[List[str]] = None

    class Config:
        json_schema_extra = {
            "example": {
                "price": 69.99,
                "stock": 45
            }
        }


class ProductResponse(BaseModel):
    """Schema for product response"""
    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    stock: int
    sizes: List[str]
    colors: List[str]
    vendor: Optional[str] = None
    vendor_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": "507f1f77bcf86cd799439011",
                "name": "Denim Jeans",
                "description": "High-quality denim jeans with perfect fit",
                "price": 79.99,
                "category": "Jeans",
                "image": "https://example.com/jeans.jpg",
                "stock": 30,
                "sizes": ["30", "32", "34"],
                "colors": ["Blue"],
                "vendor": "507f191e810c19729de860ea",
                "vendor_name": "Acme Apparel",
                "created_at": "2024-01-01T00:00:00",
                "updated_at": "2024-01-01T00:00:00"
            }
        }
