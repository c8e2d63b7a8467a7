"""
Configuration module for the Media Chat Bridge application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration class."""

    # API Keys
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

    # Application Settings
    APP_TITLE: str = "Media Chat Bridge"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    MAX_HISTORY_MESSAGES: int = int(os.getenv("MAX_HISTORY_MESSAGES", "30"))

    # Models
    TEXT_MODEL: str = os.getenv("TEXT_MODEL", "gpt-4-turbo-preview")
    IMAGE_MODEL: str = os.getenv("IMAGE_MODEL", "dall-e-3")
    SPEECH_MODEL: str = os.getenv("SPEECH_MODEL", "tts-1")
    SPEECH_VOICE: str = os.getenv("SPEECH_VOICE", "alloy")

    # Generation parameters
    TEXT_TEMPERATURE: float = 0.7
    TEXT_MAX_TOKENS: int = 1000
    SPEECH_TEXT_MAX_TOKENS: int = 150
    IMAGE_SIZE: str = "1024x1024"

    # Retry policy (delays in seconds)
    RETRY_MAX_RETRIES: int = 3
    RETRY_INITIAL_DELAY: float = 1.0
    RETRY_MAX_DELAY: float = 5.0

    # Timeouts (in seconds)
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "60"))
    PROVIDER_TIMEOUT: float = 50.0
    BRIDGE_TIMEOUT: float = 90.0

    # Attachment ceilings (bytes). Inline uploads and sent attachments are checked separately.
    MAX_ATTACHMENT_BYTES: int = 10 * 1024 * 1024
    MAX_INLINE_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Client
    BRIDGE_URL: str = os.getenv("BRIDGE_URL", "http://localhost:8000")

    @classmethod
    def is_configured(cls) -> bool:
        """Check whether the provider API key is available."""
        return bool(cls.OPENAI_API_KEY)

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing API keys."""
        if not cls.OPENAI_API_KEY:
            print("   WARNING: OPENAI_API_KEY not found in .env file")
            print("   /api/chat will answer 500 until a key is configured. Get one from: https://platform.openai.com/api-keys")

Config.validate()
