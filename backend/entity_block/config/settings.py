from pydantic_settings import BaseSettings
from typing import Optional
import logging

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str = "sqlite:///./entity_block.db"
    # Security
    jwt_secret_key: Optional[str] = None
    jwt_algorithm: str = "HS256"
    jwt_expiration_hours: int = 24
    # Logging
    log_level: str = "INFO"
    debug: bool = False
    # CORS
    cors_origins: list = ["http://localhost:3000"]
    # Telemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"  # "console" or "none"
    
    class Config:
        env_file = ".env"
        case_sensitive = False


def validate_settings(settings: Settings) -> None:
    """Validate required settings"""
    errors = []
    
    # Security
    if not settings.jwt_secret_key:
        errors.append("JWT_SECRET_KEY is required")
    
    if settings.telemetry_exporter.lower() not in ("console", "none"):
        errors.append("TELEMETRY_EXPORTER must be 'console' or 'none'")
    
    if errors:
        error_message = "Configuration errors:\n" + "\n".join(f"  - {error}" for error in errors)
        raise ValueError(error_message)


settings = Settings()
validate_settings(settings)
logger.info("Settings loaded and validated successfully")
