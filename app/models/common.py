"""Common models shared by stored documents"""

from pydantic import BaseModel, EmailStr, Field


class ShippingInfo(BaseModel):
    """Shipping address block attached to an order"""
    full_name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    address: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    country: str = "India"

    class Config:
        json_schema_extra = {
            "example": {
                "full_name": "Asha Rao",
                "email": "asha@example.com",
                "phone": "+919876543210",
                "address": "12 MG Road",
                "city": "Bengaluru",
                "state": "Karnataka",
                "zip_code": "560001",
                "country": "India"
            }
        }
