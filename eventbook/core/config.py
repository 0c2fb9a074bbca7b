# eventbook/core/config.py

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Values come from the process environment; unknown variables are ignored.
    model_config = SettingsConfigDict(extra="ignore")

    # The environment mode: 'local' or 'prod'
    ENV: str = "local"

    DATABASE_URL_LOCAL: str = "sqlite:///./eventbook.db"
    DATABASE_URL_PROD: Optional[str] = None

    # Staff bearer tokens are HS256 JWTs signed with this secret
    JWT_SECRET: str = "change-me"

    # --- Email (Resend) ---
    # Leaving the key unset puts reminder sending into mock mode.
    RESEND_API_KEY: Optional[str] = None
    RESEND_FROM_EMAIL: str = "Platform One <noreply@resend.dev>"

    # Public URL of the frontend, used to build confirmation links
    APP_BASE_URL: str = "http://localhost:3000"

    # Comma-separated list of allowed CORS origins
    CORS_ORIGINS: str = "http://localhost:3000"

    # --- Reminder workflow ---
    REMINDER_SEND_CONCURRENCY: int = 10
    # When False, a confirmation that is already CONFIRMED/DECLINED rejects
    # further responses with 409.
    ALLOW_RESPONSE_CHANGES: bool = True
    CONFIRM_RATE_LIMIT: str = "30/minute"

    LOG_LEVEL: str = "INFO"

    @property
    def DATABASE_URL(self) -> str:
        if self.ENV == "local" or not self.DATABASE_URL_PROD:
            return self.DATABASE_URL_LOCAL
        return self.DATABASE_URL_PROD

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from a comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Create a single instance of the settings
settings = Settings()
