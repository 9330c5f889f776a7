"""Application configuration using Pydantic Settings."""

from typing import Annotated, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in the
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a default so the server can start without a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=5000, ge=1, le=65535, description="Server port")

    # CORS Settings
    allowed_origins: Annotated[List[str], NoDecode] = Field(
        default="http://localhost:5173, https://stumbleuponprompt.replit.app",
        validate_default=True,
        description="Comma-separated list of allowed CORS origins"
    )

    # Public site used for deep links, sitemap and Open Graph URLs
    site_base_url: str = Field(
        default="https://stumbleuponprompt.replit.app",
        description="Public base URL of the browsing site"
    )

    # Prompt Store
    seed_sample_prompts: bool = Field(default=True, description="Load sample prompts into the store at startup")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def parse_origins(cls, v):
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("site_base_url")
    @classmethod
    def validate_site_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("Site base URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"


# Create a singleton instance
settings = Settings()


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
