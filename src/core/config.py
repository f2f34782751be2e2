"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Why environment variables:
1. Security - The Gemini API key is never committed to Git
2. Flexibility - Different values per environment (dev/production)
3. Easy deployment override - No code changes needed per environment
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files; console only when unset
        gemini_api_key: API key for the Google Gemini service
        default_model: Model used when a request does not name one
        host: Interface the gateway listens on
        port: Port the gateway listens on
        cors_origins: Origins allowed to call the gateway from a browser
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Optional[str]

    # LLM settings
    gemini_api_key: str
    default_model: str

    # Server settings
    host: str
    port: int
    cors_origins: Tuple[str, ...]

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env.lower() == "production"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _parse_origins(raw: str) -> Tuple[str, ...]:
    """Split a comma-separated origin list, dropping blanks."""
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists for the lifetime of the process.

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If required environment variables are missing or
            DEFAULT_MODEL is not part of the model catalog
    """
    # Imported here so the catalog module stays free of config imports
    from src.llm.catalog import AVAILABLE_MODELS, PREFERRED_MODEL

    default_model = _get_env("DEFAULT_MODEL", PREFERRED_MODEL)
    if default_model not in AVAILABLE_MODELS:
        raise ValueError(
            f"DEFAULT_MODEL '{default_model}' is not one of: "
            f"{', '.join(sorted(AVAILABLE_MODELS))}"
        )

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "GeminiChatRelay"),
        app_env=_get_env("APP_ENV", "production"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=os.environ.get("LOG_DIR") or None,

        # LLM
        gemini_api_key=_get_env("GEMINI_API_KEY"),
        default_model=default_model,

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "3000")),
        cors_origins=_parse_origins(_get_env("CORS_ORIGINS", "*")),
    )
