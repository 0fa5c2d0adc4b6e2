"""Product models"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List, Any


class Product(BaseModel):
    """Product document as stored in the products collection"""
    id: Optional[str] = Field(None, alias="_id")
    name: str
    description: str
    price: float = Field(ge=0)
    category: str
    image: str
    stock: int = Field(default=0, ge=0)
    sizes: List[str] = []
    colors: List[str] = []
    vendor: Optional[Any] = None
    vendor_name: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "Classic White T-Shirt",
                "description": "Premium cotton t-shirt with a comfortable fit",
                "price": 29.99,
                "category": "T-Shirts",
                "image": "https://example.com/tshirt.jpg",
                "stock": 50,
                "sizes": ["S", "M", "L"],
                "colors": ["White"],
                "vendor_name": "Acme Apparel"
            }
        }

    def to_document(self) -> dict:
        """Dictionary ready for insert_one; vendor stays an ObjectId"""
        document = self.model_dump(mode="python", exclude={"id"})
        if document.get("vendor") is None:
            document.pop("vendor")
            document.pop("vendor_name")
        return document
