# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Service metadata
        self.project_name: Final[str] = os.getenv("PROJECT_NAME", "Barberbook Booking API")
        self.api_version: Final[str] = os.getenv("API_VERSION", "1.0.0")

        # Timezone Configuration
        # Applied to naive ISO-8601 strings (e.g., "2024-03-15T10:00:00" without offset)
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "barberbook")

        # Collection Names
        self.shops_collection: Final[str] = os.getenv("SHOPS_COLLECTION", "barbershops")
        self.operators_collection: Final[str] = os.getenv("OPERATORS_COLLECTION", "operators")
        self.services_collection: Final[str] = os.getenv("SERVICES_COLLECTION", "services")
        self.bookings_collection: Final[str] = os.getenv("BOOKINGS_COLLECTION", "bookings")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # HTTP server / CORS
        self.api_host: Final[str] = os.getenv("API_HOST", "0.0.0.0")
        self.api_port: Final[int] = int(os.getenv("API_PORT", "8000"))
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
