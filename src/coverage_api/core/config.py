"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend data store (PostgREST-compatible)
    backend_url: str = Field(
        default="http://localhost:54321",
        description="Base URL of the hosted backend (REST API lives under /rest/v1)",
    )
    backend_api_key: str = Field(
        default="",
        description="Backend anon/service key sent as apikey and bearer token",
    )
    backend_timeout: float = Field(
        default=10.0,
        description="Backend request timeout in seconds",
        gt=0,
    )
    system_input_process: str = Field(
        default="coverage-api",
        description="Tag stamped on every record written to the backend",
    )
    acquisition_source: str = Field(
        default="whatsapp_onboarding",
        description="Acquisition source recorded on newly created customers",
    )

    @field_validator("backend_url")
    @classmethod
    def validate_backend_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "backend_url must be an http(s) URL"
            raise ValueError(msg)
        return v.rstrip("/")

    # Reverse geocoding: general
    geocoder_fallback_order: str = Field(
        default="nominatim,bigdatacloud",
        description="Comma-separated remote provider order, tried before the local gazetteer",
    )

    # Reverse geocoding: Nominatim (OpenStreetMap)
    geocoder_nominatim_enabled: bool = Field(
        default=True,
        description="Enable Nominatim (OpenStreetMap) reverse geocoder",
    )
    geocoder_nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Nominatim base URL (self-hostable)",
    )
    geocoder_nominatim_user_agent: str = Field(
        default="coverage-api/1.0",
        description="User-Agent header required by the Nominatim usage policy",
    )
    geocoder_nominatim_timeout: float = Field(
        default=5.0,
        description="Nominatim request timeout in seconds",
        gt=0,
    )

    # Reverse geocoding: BigDataCloud
    geocoder_bigdatacloud_enabled: bool = Field(
        default=True,
        description="Enable BigDataCloud client-side reverse geocoder",
    )
    geocoder_bigdatacloud_base_url: str = Field(
        default="https://api.bigdatacloud.net",
        description="BigDataCloud API base URL",
    )
    geocoder_bigdatacloud_timeout: float = Field(
        default=5.0,
        description="BigDataCloud request timeout in seconds",
        gt=0,
    )

    @property
    def geocoder_fallback_order_list(self) -> list[str]:
        """Parse fallback order string into a list of provider names.

        Returns:
            List of provider names in fallback order.
        """
        if not self.geocoder_fallback_order.strip():
            return []
        return [p.strip().lower() for p in self.geocoder_fallback_order.split(",") if p.strip()]

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (the onboarding widget host)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
