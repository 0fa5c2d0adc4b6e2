"""Authentication endpoints"""

from fastapi import APIRouter, Depends, HTTPException, status
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from datetime import datetime
import logging

from app.database import get_database
from app.api.deps import get_current_user, require_admin_key
from app.core.security import create_user_token, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    UserProfileResponse,
)
from app.schemas.user import UpdateRoleRequest, UpdateRoleResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def user_to_profile(user: dict) -> UserProfileResponse:
    """Convert database user document to UserProfileResponse"""
    return UserProfileResponse(
        id=str(user["_id"]),
        name=user.get("name") or "",
        email=user["email"],
        role=user.get("role", "customer"),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Register a new account and return a JWT access token.
    Emails are unique (case-insensitive).
    """
    email = request.email.lower()

    existing_user = await db.users.find_one({"email": email})
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    user = User(
        name=request.name,
        email=email,
        password=hash_password(request.password),
        role=request.role,
    )

    try:
        result = await db.users.insert_one(user.to_document())
    except DuplicateKeyError:
        # Lost a race with a concurrent registration for the same email
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )

    created_user = await db.users.find_one({"_id": result.inserted_id})
    logger.info(f"Registered {created_user['role']} account {result.inserted_id}")

    return TokenResponse(
        message="User created successfully",
        token=create_user_token(created_user),
        user=user_to_profile(created_user),
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Verify email and password and return a JWT access token
    """
    user = await db.users.find_one({"email": request.email.lower()})

    if not user or not verify_password(request.password, user.get("password")):
        logger.warning(f"Failed login attempt for {request.email.lower()}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials"
        )

    logger.info(f"User {user['_id']} logged in")

    return TokenResponse(
        message="Login successful",
        token=create_user_token(user),
        user=user_to_profile(user),
    )


@router.get("/me", response_model=UserProfileResponse)
async def get_current_user_profile(
    current_user: dict = Depends(get_current_user)
):
    """
    Get current authenticated user's profile
    """
    return user_to_profile(current_user)


@router.post(
    "/users/role",
    response_model=UpdateRoleResponse,
    dependencies=[Depends(require_admin_key)],
)
async def update_user_role(
    request: UpdateRoleRequest,
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    """
    Change a user's role by email.
    Requires the X-Admin-Key header.
    """
    user = await db.users.find_one_and_update(
        {"email": request.email.lower()},
        {"$set": {"role": request.role.value, "updated_at": datetime.utcnow()}},
        projection={"password": 0},
        return_document=ReturnDocument.AFTER,
    )

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    logger.info(f"Role of user {user['_id']} set to {request.role.value}")

    return UpdateRoleResponse(user=user_to_profile(user))
