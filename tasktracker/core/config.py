# tasktracker/core/config.py
from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ALLOWED_ENVS = {"dev", "prod", "test"}


class Settings(BaseSettings):
    """Process configuration; env var names are the upper-cased field names."""

    # 기본 앱 설정
    app_env: str = "dev"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    # DB
    database_url: str = "sqlite:///./tasktracker.db"
    auto_create_tables: bool = True

    # JWT
    jwt_secret_key: str = "tasktracker-secret-key"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 1440

    # CORS
    cors_allow_origins: str = "http://localhost:3001"
    cors_allow_origin_regex: str | None = r"https://.*\.vercel\.app"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("app_env")
    @classmethod
    def _check_env(cls, v: str) -> str:
        env = v.strip().lower()
        if env not in _ALLOWED_ENVS:
            allowed = "|".join(sorted(_ALLOWED_ENVS))
            raise ValueError(f"APP_ENV must be one of {allowed}")
        return env

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
