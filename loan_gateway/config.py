"""Configuration management using Pydantic Settings"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "loan-gateway"
    log_level: str = "INFO"

    # Applicant registry
    registry_backend: Literal["memory", "http"] = "memory"
    registry_api_base: str = "http://localhost:8001"

    # HTTP Client
    http_timeout_seconds: float = 5.0


settings = Settings()
