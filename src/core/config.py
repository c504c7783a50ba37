"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities import Credentials


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file. Credentials are not validated here; a missing
    value only surfaces when the gateway rejects the first call.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="None",
    )

    # Application
    app_name: str = "stk-relay"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Daraja credentials
    consumer_key: str = ""
    consumer_secret: str = ""
    business_shortcode: str = ""
    passkey: str = ""
    callback_url: str = ""

    # External APIs
    daraja_base_url: str = "https://sandbox.safaricom.co.ke"
    # None waits on the gateway indefinitely
    gateway_timeout: float | None = None

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    def credentials(self) -> Credentials:
        """Snapshot the merchant credentials as an immutable value."""
        return Credentials(
            consumer_key=self.consumer_key,
            consumer_secret=self.consumer_secret,
            shortcode=self.business_shortcode,
            passkey=self.passkey,
            callback_url=self.callback_url,
        )


@lru_cache
def load_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
