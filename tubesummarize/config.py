"""
Configuration settings for the TubeSummarize application.
"""

import os
from typing import List
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        print(f"WARNING: {name}={value!r} is not an integer, using {default}.")
        return default


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "TubeSummarize"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
    HISTORY_FILE = Path(os.getenv("HISTORY_FILE", str(DATA_DIR / "history.json")))

    # History store backend: "memory" or "file"
    STORE_BACKEND = os.getenv("STORE_BACKEND", "file").lower()

    # API keys
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")

    # Default models
    DEFAULT_SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "llama-3.3-70b-versatile")

    # Videos longer than this are rejected; 0 disables the check
    MAX_VIDEO_DURATION_MINUTES = _int_env("MAX_VIDEO_DURATION_MINUTES", 30)

    # Timeout applied to every outbound call to YouTube
    REQUEST_TIMEOUT_SECONDS = _int_env("REQUEST_TIMEOUT_SECONDS", 15)

    CAPTION_LANGUAGES: List[str] = [
        lang.strip() for lang in os.getenv("CAPTION_LANGUAGES", "en").split(",") if lang.strip()
    ]

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)

        # Validate optional environment variables
        if not cls.YOUTUBE_API_KEY:
            print("WARNING: YOUTUBE_API_KEY environment variable not set.")
            print("Video metadata will be resolved with pytubefix instead of the YouTube Data API.")
        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables to enable summaries.")


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
