"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "transfer-router"
    log_level: str = "INFO"

    # Routing
    high_risk_threshold: float = 70.0  # Warn when every selected route scores above this


settings = Settings()
