"""Application configuration using Pydantic Settings"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App
    app_name: str = "Storefront API"
    debug: bool = False
    cors_origins: List[str] = ["*"]

    # Database
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "ecommerce"

    # Security
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24  # 24 hours
    bcrypt_rounds: int = 12

    # Operational utilities (role update, seeding); disabled when unset
    admin_api_key: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
