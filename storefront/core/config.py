# Standard library imports
import os
from typing import Final, Optional
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

        # Storage backend: "memory" (default, used by tests) or "mongo"
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "memory").lower()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "storefront")

        # Collection Names
        self.products_collection: Final[str] = os.getenv("PRODUCTS_COLLECTION", "products")
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")
        self.log_file: Final[Optional[str]] = os.getenv("LOG_FILE")

        # API Configuration
        self.api_prefix: Final[str] = os.getenv("API_PREFIX", "/api/v1")
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8000"))


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


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
