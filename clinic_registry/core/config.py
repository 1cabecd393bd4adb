from pydantic_settings import BaseSettings
from typing import List
import logging
import os

class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Clinic Appointment Registry"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    TESTING: bool = os.getenv("TESTING", "0").lower() in ("1", "true", "t", "yes", "y")
    LOG_LEVEL: str = "INFO"

    # Registry
    SEED_SAMPLE_DATA: bool = False  # Load the demo doctors on startup

    # CORS
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8080", "http://testserver"]

    @property
    def log_level(self) -> int:
        """Return the numeric logging level, falling back to INFO."""
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
