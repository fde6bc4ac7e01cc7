from datetime import date
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "liftlog"
    DB_URL: str | None = None                      # full URL wins over the parts (sqlite for local runs)

    # Day boundaries follow the lifter's zone, not the server's
    TIMEZONE: str = "America/New_York"
    TRACKING_START: date = date(2026, 1, 1)

    # Tokens are issued by the external identity service; we only verify them
    AUTH_JWT_SECRET: str = "dev-secret-change-me"
    AUTH_JWT_ALGORITHM: str = "HS256"
    AUTH_JWT_AUDIENCE: str | None = "authenticated"
    OWNER_SUB: str | None = None                   # single-user lock; unset accepts any valid token

    PREFERENCES_PATH: str = ".liftlog-preferences.json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("TIMEZONE")
    @classmethod
    def known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown time zone: {v!r}")
        return v

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
