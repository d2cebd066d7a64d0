from pydantic_settings import BaseSettings
from typing import List, Optional


# Only these values are accepted by input validation
SUPPORTED_COUNTRY = "NL"
SUPPORTED_YEAR = 2024


class Settings(BaseSettings):
    """Application settings and configuration"""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Public Holidays API"

    # Upstream holiday API
    API_BASE: str = "https://date.nager.at/api/v3"
    UPSTREAM_TIMEOUT: Optional[float] = None  # None waits indefinitely

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    class Config:
        case_sensitive = True
        env_file = ".env"
        extra = "ignore"


settings = Settings()


def get_settings() -> Settings:
    return settings
