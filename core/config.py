"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
import logging
from functools import lru_cache
from typing import List

from pydantic import ConfigDict, Field, field_validator

from pydantic_settings import BaseSettings

DEFAULT_TEMPLATES = [
    "sales-report.rptdesign",
    "inventory-report.rptdesign",
    "customer-report.rptdesign",
]


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Environment
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    # Application
    app_name: str = "Report Engine API"
    app_version: str = "1.0.0"
    service_name: str = Field(default="Report Engine")
    cors_origins: List[str] = Field(default=["*"])

    # Artifact storage
    template_dir: str = Field(default="reports/templates", description="Directory for template artifacts")
    output_dir: str = Field(default="reports/output", description="Directory for output artifacts")
    template_extension: str = Field(default="rptdesign")
    download_base_path: str = Field(default="/api/reports/download")

    # Simple-request path
    simulated_generation_ms: int = Field(default=100, ge=0, description="Artificial delay of /generate")
    available_templates: List[str] = Field(default_factory=lambda: list(DEFAULT_TEMPLATES))

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    # Monitoring
    prometheus_enabled: bool = Field(default=True)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @field_validator("template_extension")
    @classmethod
    def strip_extension_dot(cls, v):
        return v.lstrip(".")

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "test"

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
