"""Application configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Order endpoint (the reference backend echoes the posted order)
    order_endpoint_url: str = "https://reqres.in/api/cupcakes"
    order_request_timeout: float = 5.0

    # Storefront
    store_name: str = "Cupcake Corner"

    # Logging
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
