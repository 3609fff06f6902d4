"""Authentication headers for outgoing requests."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from ..config import settings

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"
VERSION_HEADER = "anthropic-version"

# Headers never written to logs verbatim
SENSITIVE_HEADERS = frozenset({"authorization", API_KEY_HEADER})


class MissingApiKeyError(ValueError):
    """No API key was given and none is configured."""


@dataclass(frozen=True)
class ApiKey:
    """Anthropic API key."""

    value: str

    def __repr__(self) -> str:
        return f"ApiKey({self.masked()})"

    def masked(self) -> str:
        """Key with everything but the last four characters hidden."""
        return "***" + self.value[-4:] if len(self.value) > 8 else "***"

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "ApiKey":
        """Use ``api_key`` if given, else ``ANTHROPIC_API_KEY`` from settings."""
        value = api_key or settings.ANTHROPIC_API_KEY
        if not value:
            raise MissingApiKeyError(
                "Missing API key. Pass api_key or set the ANTHROPIC_API_KEY environment variable."
            )
        return cls(value)


def auth_headers(api_key: ApiKey, version: Optional[str] = None) -> Dict[str, str]:
    """Fixed headers sent with every messages request."""
    return {
        API_KEY_HEADER: api_key.value,
        VERSION_HEADER: version or settings.ANTHROPIC_VERSION,
        "content-type": "application/json",
    }


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Copy of ``headers`` safe to log."""
    return {k: ("***" if k.lower() in SENSITIVE_HEADERS else v) for k, v in headers.items()}
