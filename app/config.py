"""
Configuration settings for the YouTube tutorial generator application.
"""

import os
from typing import Dict, Any
from pathlib import Path
from dotenv import load_dotenv

from app.models.schemas import TutorialSettings


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "YouTube Tutorial Generator"
    APP_VERSION = "0.2.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOGS_DIR = BASE_DIR / "logs"

    # API keys
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Default models
    DEFAULT_GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

    # Timeouts (seconds)
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "300"))

    TRANSCRIPT_LANGUAGES = [
        lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
    ]

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def tutorial_settings(cls, **overrides: Any) -> TutorialSettings:
        """
        Build the explicit settings struct handed to the core pipeline.

        Args:
            overrides: Field values that take precedence over the environment

        Returns:
            TutorialSettings instance
        """
        values = {
            "youtube_api_key": cls.YOUTUBE_API_KEY,
            "gemini_api_key": cls.GEMINI_API_KEY,
            "gemini_model": cls.DEFAULT_GEMINI_MODEL,
            "request_timeout": cls.REQUEST_TIMEOUT,
            "llm_timeout": cls.LLM_TIMEOUT,
            "transcript_languages": cls.TRANSCRIPT_LANGUAGES or ["en"],
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return TutorialSettings(**values)

    @classmethod
    def get_paths(cls) -> Dict[str, Path]:
        """Get all application paths."""
        return {
            "base_dir": cls.BASE_DIR,
            "logs_dir": cls.LOGS_DIR,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
