"""Application configuration."""

import os
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    jwt_secret: str
    admin_pw_hash: str
    supabase_url: str
    supabase_service_key: str
    image_store: Literal["github", "supabase"] = "github"
    github_api_token: str | None = None
    github_owner: str = "ogg1996"
    github_repo: str = "ggdevlog-img-uploads"
    github_branch: str = "main"
    github_image_dir: str = "images"
    supabase_image_bucket: str = "images"
    image_store_timeout_seconds: float = 10.0
    activity_file_path: str = "data/activity.json"
    introduce_file_path: str = "data/introduce.json"
    cookie_secure: bool = True
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_image_store_credentials(self) -> "Settings":
        if self.image_store == "github" and not self.github_api_token:
            raise ValueError("github_api_token is required when image_store=github")
        return self


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse a comma-separated list of allowed CORS origins."""
    if raw is None:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
