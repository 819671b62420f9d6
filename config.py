import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Request
from pydantic import BaseModel, Field


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing from the environment."""


class Settings(BaseModel):
    secret_key: str = Field(..., min_length=1)
    admin_password: str = Field(..., min_length=1)
    database_url: str = "sqlite:///./festiverse.db"
    api_prefix: str = "/api"
    algorithm: str = "HS256"
    admin_token_expire_minutes: int = 120
    user_token_expire_minutes: int = 60 * 24
    public_dir: str = "public"
    upload_dir: str = os.path.join("public", "uploads")
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"frozen": True}


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if os.getenv("MYSQL_HOST"):
        return (
            f"mysql+pymysql://{os.getenv('MYSQL_USER')}:"
            f"{os.getenv('MYSQL_PASSWORD')}@"
            f"{os.getenv('MYSQL_HOST')}:{os.getenv('MYSQL_PORT', '3306')}/"
            f"{os.getenv('MYSQL_DB')}"
        )
    return "sqlite:///./festiverse.db"


def _required(name: str) -> str:
    value: Optional[str] = os.getenv(name)
    if not value:
        raise ConfigurationError(f"{name} must be set; refusing to start without it.")
    return value


def load_settings() -> Settings:
    """
    Build Settings from the process environment (and `.env`, if present).

    SECRET_KEY and ADMIN_PASSWORD have no defaults: the service fails closed
    when either is missing.
    """
    load_dotenv()

    public_dir = os.getenv("PUBLIC_DIR", "public")
    origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    return Settings(
        secret_key=_required("SECRET_KEY"),
        admin_password=_required("ADMIN_PASSWORD"),
        database_url=_database_url(),
        api_prefix=os.getenv("API_PREFIX", "/api"),
        admin_token_expire_minutes=int(os.getenv("ADMIN_TOKEN_EXPIRE_MINUTES", 120)),
        user_token_expire_minutes=int(os.getenv("USER_TOKEN_EXPIRE_MINUTES", 60 * 24)),
        public_dir=public_dir,
        upload_dir=os.getenv("UPLOAD_DIR", os.path.join(public_dir, "uploads")),
        cors_origins=origins or ["*"],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings
