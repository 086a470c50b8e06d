"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``CATALOG_VIEWER_*`` environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Catalog source
    catalog_api_url: str = Field(
        default="https://api.escuelajs.co/api/v1/products",
        description="Endpoint returning the product catalog as a JSON array",
    )
    request_timeout: float = Field(default=10.0, gt=0, description="Fetch timeout in seconds")
    fetch_on_startup: bool = True

    # View
    default_page_size: int = Field(default=10, ge=1)
    page_size_options: list[int] = Field(default_factory=lambda: [10, 25, 50])

    # Rendering
    placeholder_image_template: str = Field(
        default="https://placehold.co/80x80/667eea/white?text=IMG+{index}",
        description="Fallback image URL; {index} is the 1-based image position",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_VIEWER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
