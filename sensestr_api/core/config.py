# Standard library imports
import os
from typing import Final, List, Optional


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "3000"))
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "sensestr")
        self.mongo_startup_check: Final[bool] = _as_bool(os.getenv("MONGO_STARTUP_CHECK", "true"))

        # Resource Configuration
        self.enabled_resources: Final[List[str]] = _split_csv(
            os.getenv("ENABLED_RESOURCES", "devices,sessions,viewers")
        )
        self.event_resources: Final[List[str]] = _split_csv(os.getenv("EVENT_RESOURCES", "viewers"))

        # Token Verification Configuration
        self.auth_jwks_uri: Final[str] = os.getenv(
            "AUTH_JWKS_URI",
            "https://sensestr-prod.us.auth0.com/.well-known/jwks.json"
        )
        self.auth_audience: Final[str] = os.getenv("AUTH_AUDIENCE", "https://api.sensestr.io")
        self.auth_issuer: Final[str] = os.getenv("AUTH_ISSUER", "https://sensestr-prod.us.auth0.com/")
        self.auth_algorithms: Final[List[str]] = _split_csv(os.getenv("AUTH_ALGORITHMS", "RS256"))
        # Local development only: verify HS256 tokens with a shared secret instead of JWKS
        self.auth_shared_secret: Final[str] = os.getenv("AUTH_SHARED_SECRET", "")

        # Event API Configuration
        self.auth_token_url: Final[str] = os.getenv(
            "AUTH_TOKEN_URL",
            "https://sensestr-prod.us.auth0.com/oauth/token"
        )
        self.client_id: Final[str] = os.getenv("CLIENT_ID", "")
        self.client_secret: Final[str] = os.getenv("CLIENT_SECRET", "")
        self.event_api_base: Final[str] = os.getenv("EVENT_API_BASE", "")
        self.event_api_socket_path: Final[str] = os.getenv("EVENT_API_SOCKET_PATH", "/events")
        self.event_token_refresh_seconds: Final[float] = float(
            os.getenv("EVENT_TOKEN_REFRESH_SECONDS", "35000")
        )
        # First delay between socket connection attempts; doubles up to 60s
        self.event_reconnect_seconds: Final[float] = float(os.getenv("EVENT_RECONNECT_SECONDS", "2"))


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
