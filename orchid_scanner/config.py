"""Configuration settings for the application."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Orchid Scanner API"
    debug: bool = False
    log_level: str = "INFO"

    # AI providers (a provider counts as configured when key and model are both set)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    anthropic_max_tokens: int = 2048
    ai_timeout_seconds: float = 60.0

    # Nursery scrape
    nursery_base_url: str = "https://andysorchids.com"
    scrape_timeout_seconds: float = 10.0

    # ~15MB of base64 text
    max_image_b64_bytes: int = 15 * 1024 * 1024

    # Bulk reprocessing
    batch_size: int = 5
    batch_delay_seconds: float = 2.0

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def gemini_configured(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_model)

    @property
    def anthropic_configured(self) -> bool:
        return bool(self.anthropic_api_key and self.anthropic_model)


settings = Settings()
