"""Core utilities for the application"""

from app.core.security import (
    create_access_token,
    create_user_token,
    verify_token,
    hash_password,
    verify_password,
)

__all__ = [
    "create_access_token",
    "create_user_token",
    "verify_token",
    "hash_password",
    "verify_password",
]
