"""User models"""

from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional
from enum import Enum


class UserRole(str, Enum):
    """User role enumeration"""
    CUSTOMER = "customer"
    VENDOR = "vendor"


class User(BaseModel):
    """User document as stored in the users collection"""
    id: Optional[str] = Field(None, alias="_id")
    name: str
    email: EmailStr
    password: str
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "user@example.com",
                "role": "customer"
            }
        }

    def to_document(self) -> dict:
        """Dictionary ready for insert_one (no _id, enums as values)"""
        document = self.model_dump(mode="python", exclude={"id"})
        document["role"] = self.role.value
        return document
