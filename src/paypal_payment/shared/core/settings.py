"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8003
    debug: bool = True

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # PayPal provider options (no defaults: validated when the adapter is built)
    paypal_client_id: str | None = None
    paypal_client_secret: str | None = None
    paypal_environment: str | None = None

    # CORS
    cors_origins: list[str] = ["http://localhost:8000", "http://localhost:9000"]

    def paypal_options(self) -> dict[str, str | None]:
        """Provider options in the shape the payment framework registers them."""
        return {
            "oAuthClientId": self.paypal_client_id,
            "oAuthClientSecret": self.paypal_client_secret,
            "environment": self.paypal_environment,
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
