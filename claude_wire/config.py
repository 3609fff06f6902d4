"""Configuration management for claude-wire."""

import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Client settings."""

    # Endpoint
    ANTHROPIC_BASE_URL: str = os.getenv("ANTHROPIC_BASE_URL", "https://api.anthropic.com")
    ANTHROPIC_VERSION: str = os.getenv("ANTHROPIC_VERSION", "2023-06-01")
    MESSAGES_PATH: str = os.getenv("MESSAGES_PATH", "/v1/messages")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "600"))

    # Authentication
    ANTHROPIC_API_KEY: Optional[str] = os.getenv("ANTHROPIC_API_KEY")

    # Debug
    DEBUG_MODE: bool = os.getenv("DEBUG_MODE", "false").lower() == "true"
    DEBUG_LOG_PAYLOADS: bool = os.getenv("DEBUG_LOG_PAYLOADS", "false").lower() == "true"
    DEBUG_LOG_MAX_LENGTH: int = int(os.getenv("DEBUG_LOG_MAX_LENGTH", "2000"))

    # Logging
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIR: str = os.getenv("LOG_DIR", "logs")
    LOG_FILE: str = os.getenv("LOG_FILE", "claude_wire.log")

    # Models - alias to official model mapping
    MODEL_ALIASES: dict[str, str] = {
        "claude-opus-4-5": "claude-opus-4-5-20251101",
        "claude-sonnet-4-5": "claude-sonnet-4-5-20250929",
        "claude-haiku-4-5": "claude-haiku-4-5-20251001",
        "claude-opus-4-1": "claude-opus-4-1-20250805",
        "claude-3-7-sonnet-latest": "claude-3-7-sonnet-20250219",
        "claude-3-5-haiku-latest": "claude-3-5-haiku-20241022",
    }
    DEFAULT_MODEL: str = os.getenv("DEFAULT_MODEL", "claude-sonnet-4-5")

    @classmethod
    def resolve_model(cls, model: str) -> str:
        """Resolve model alias to official model name."""
        return cls.MODEL_ALIASES.get(model, model)


settings = Settings()
