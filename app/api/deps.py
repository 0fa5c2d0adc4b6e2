"""FastAPI dependencies for authentication and database access"""

from fastapi import Depends, HTTPException, status, Header
from motor.motor_asyncio import AsyncIOMotorDatabase
from app.config import settings
from app.database import get_database
from app.core.security import verify_token
from app.models.user import UserRole
from app.utils.validators import validate_object_id
from bson import ObjectId
from typing import Optional
import secrets
import logging

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Optional[str] = Header(None),
    db: AsyncIOMotorDatabase = Depends(get_database)
) -> dict:
    """
    Dependency to get current authenticated user from JWT token

    Args:
        authorization: Authorization header with Bearer token
        db: Database instance

    Returns:
        User dictionary from database, without the password hash

    Raises:
        HTTPException: 401 if authentication fails
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized("Access token required")

    token = authorization[len("Bearer "):].strip()
    payload = verify_token(token)

    if not payload:
        raise _unauthorized("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id or not validate_object_id(user_id):
        raise _unauthorized("Invalid token payload")

    # The role claim in the token is never trusted; always read the stored user
    user = await db.users.find_one({"_id": ObjectId(user_id)}, {"password": 0})

    if not user:
        raise _unauthorized("User not found")

    return user


async def require_vendor(
    current_user: dict = Depends(get_current_user)
) -> dict:
    """
    Dependency to require the vendor role

    Args:
        current_user: Current user from get_current_user

    Returns:
        Vendor user dictionary

    Raises:
        HTTPException: 403 if the user is not a vendor
    """
    if current_user.get("role") != UserRole.VENDOR.value:
        logger.warning(f"Vendor access denied for user {current_user['_id']}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Vendor access required",
        )

    return current_user


async def require_admin_key(
    x_admin_key: Optional[str] = Header(None)
) -> None:
    """
    Dependency guarding operational utilities (role changes, seeding)

    Raises:
        HTTPException: 403 if no admin key is configured or it does not match
    """
    if not settings.admin_api_key:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin utilities are disabled",
        )

    if not x_admin_key or not secrets.compare_digest(x_admin_key, settings.admin_api_key):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid admin key",
        )
