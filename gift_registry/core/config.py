# Standard library imports
import os
from typing import Final, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "gift_registry")
        self.item_store: Final[str] = os.getenv("ITEM_STORE", "mongo").lower()

        # Image analysis (Google Cloud Vision REST API)
        self.google_vision_api_key: Final[str] = os.getenv("GOOGLE_VISION_API_KEY", "")
        self.google_vision_url: Final[str] = os.getenv(
            "GOOGLE_VISION_URL",
            "https://vision.googleapis.com/v1/images:annotate"
        )
        self.vision_timeout_seconds: Final[float] = float(os.getenv("VISION_TIMEOUT_SECONDS", "30"))
        self.vision_max_labels: Final[int] = int(os.getenv("VISION_MAX_LABELS", "10"))

        # Photo uploads
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "uploads")
        self.upload_max_mb: Final[int] = int(os.getenv("UPLOAD_MAX_MB", "10"))
        self.upload_max_files: Final[int] = int(os.getenv("UPLOAD_MAX_FILES", "10"))

        # HTTP / logging
        self.frontend_url: Final[str] = os.getenv("FRONTEND_URL", "http://localhost:3000")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


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
