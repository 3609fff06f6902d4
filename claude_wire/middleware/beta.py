"""Beta feature negotiation.

Some request shapes are only accepted when the matching ``anthropic-beta``
header is sent. The header is derived from the request body right before the
headers are assembled, so it can never drift from what is actually sent.
"""

import logging
from enum import Enum
from typing import Dict, Iterable

from ..models.content import ContentBlock
from ..models.request import MessagesRequest

logger = logging.getLogger(__name__)

BETA_HEADER = "anthropic-beta"


class Beta(str, Enum):
    """Beta feature identifiers."""

    TOOLS_2024_04_04 = "tools-2024-04-04"
    EXTENDED_CACHE_TTL_2025_04_11 = "extended-cache-ttl-2025-04-11"

    def __str__(self) -> str:
        return self.value


def _any_one_hour(blocks: Iterable[ContentBlock]) -> bool:
    return any(block.cache_control is not None and block.cache_control.is_one_hour for block in blocks)


def has_one_hour_ttl(request: MessagesRequest) -> bool:
    """Return True if any message or system prompt block asks for a 1 hour cache.

    Messages are scanned before the system prompt and the scan stops at the
    first match. String message content and a simple system prompt carry no
    directives and are skipped.
    """
    for message in request.messages:
        if _any_one_hour(message.blocks):
            return True

    if request.system is not None and _any_one_hour(request.system.blocks):
        return True

    return False


def beta_headers(request: MessagesRequest) -> Dict[str, str]:
    """Beta headers required by ``request``."""
    if has_one_hour_ttl(request):
        logger.debug(f"Request uses a 1h cache TTL, enabling {Beta.EXTENDED_CACHE_TTL_2025_04_11}")
        return {BETA_HEADER: Beta.EXTENDED_CACHE_TTL_2025_04_11.value}
    return {}
