"""SDK settings and configuration."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

ENVIRONMENT_URLS = {
    "sandbox": "https://sandbox.singlekey.com",
    "production": "https://platform.singlekey.com",
}


class Settings(BaseSettings):
    """Client settings loaded from SINGLEKEY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SINGLEKEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    api_token: Optional[str] = None
    environment: Literal["sandbox", "production"] = "production"
    base_url: Optional[str] = None  # Overrides environment
    timeout: float = 30.0  # Seconds

    # Logging
    debug: bool = False

    @property
    def base_url_computed(self) -> str:
        """Compute base URL if not explicitly set."""
        if self.base_url:
            return self.base_url
        return ENVIRONMENT_URLS[self.environment]

    @property
    def is_sandbox(self) -> bool:
        """Check if targeting the sandbox environment."""
        return self.environment == "sandbox"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
