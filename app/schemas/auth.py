"""Authentication schemas"""

from pydantic import BaseModel, EmailStr, Field
from app.models.user import UserRole


class RegisterRequest(BaseModel):
    """Request schema for account registration"""
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)
    role: UserRole = UserRole.CUSTOMER

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "user@example.com",
                "password": "s3cret-pass",
                "role": "customer"
            }
        }


class LoginRequest(BaseModel):
    """Request schema for email/password login"""
    email: EmailStr
    password: str

    class Config:
        json_schema_extra = {
            "example": {
                "email": "user@example.com",
                "password": "s3cret-pass"
            }
        }


class UserProfileResponse(BaseModel):
    """User profile response"""
    id: str
    name: str
    email: EmailStr
    role: UserRole

    class Config:
        json_schema_extra = {
            "example": {
                "id": "507f1f77bcf86cd799439011",
                "name": "John Doe",
                "email": "user@example.com",
                "role": "customer"
            }
        }


class TokenResponse(BaseModel):
    """JWT token response"""
    success: bool = True
    message: str
    token: str
    user: UserProfileResponse
