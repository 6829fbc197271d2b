"""
Configuration management using Pydantic Settings.
Loads environment variables from .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Literal


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_env: Literal["dev", "prod", "test"] = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 8001
    log_level: str = "INFO"

    # Hosted AI chat backend (course-bound questions are delegated here)
    ai_chat_base_url: str = "http://localhost:8080/api/ai"
    ai_chat_timeout_seconds: float = 20.0
    enable_ai_delegation: bool = True
    default_user_id: str = "anonymous"

    # Frontend
    cors_origins: List[str] = [
        "http://localhost:4200",
        "http://127.0.0.1:4200",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_env == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.app_env == "dev"


# Global settings instance
settings = Settings()
