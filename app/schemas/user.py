"""User administration schemas"""

from pydantic import BaseModel, EmailStr
from app.models.user import UserRole
from app.schemas.auth import UserProfileResponse


class UpdateRoleRequest(BaseModel):
    """Schema for changing a user's role by email"""
    email: EmailStr
    role: UserRole

    class Config:
        json_schema_extra = {
            "example": {
                "email": "seller@example.com",
                "role": "vendor"
            }
        }


class UpdateRoleResponse(BaseModel):
    """Schema returned after a role change"""
    success: bool = True
    message: str = "User role updated successfully"
    user: UserProfileResponse
