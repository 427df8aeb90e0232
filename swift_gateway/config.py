"""
Gateway configuration.

All settings can be overridden with MT799_-prefixed environment variables
(e.g. MT799_DATABASE_URL, MT799_VALIDATION_POLICY=pattern) or a .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .mt799 import SegmentationPolicy, ValidationPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MT799_",
        env_file=".env",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./messages.db"
    database_echo: bool = False

    # Logging
    log_level: str = "INFO"

    # Parsing policies
    validation_policy: ValidationPolicy = ValidationPolicy.ORDERING
    segmentation_policy: SegmentationPolicy = SegmentationPolicy.LOOKAHEAD

    # OpenTelemetry
    otel_enabled: bool = False
    otel_service_name: str = "mt799-gateway"
    otel_exporter_endpoint: str = "http://localhost:4318/v1/traces"

    # CORS
    cors_origins: list[str] = ["*"]

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_requests_per_minute: int = 120
    rate_limit_burst: int = 20


settings = Settings()
