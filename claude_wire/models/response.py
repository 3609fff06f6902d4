"""Anthropic messages response models."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict

from .content import ContentBlock, TextBlock

StopReason = Literal["end_turn", "max_tokens", "stop_sequence", "tool_use", "pause_turn", "refusal"]


class CacheCreation(BaseModel):
    """Cache-write tokens split by TTL."""

    ephemeral_5m_input_tokens: int = 0
    ephemeral_1h_input_tokens: int = 0


class Usage(BaseModel):
    """Anthropic token usage."""

    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None
    cache_creation: Optional[CacheCreation] = None

    def merge(self, other: "Usage") -> "Usage":
        """Overlay the fields ``other`` actually reported onto this usage."""
        return self.model_copy(update={name: getattr(other, name) for name in other.model_fields_set})


class MessagesResponse(BaseModel):
    """Anthropic Messages API response."""

    model_config = ConfigDict(extra="allow")

    id: str
    type: Literal["message"] = "message"
    role: Literal["assistant"] = "assistant"
    content: List[ContentBlock]
    model: str
    stop_reason: Optional[StopReason] = None
    stop_sequence: Optional[str] = None
    usage: Usage

    def text(self) -> str:
        """Join the text blocks of the response."""
        return "\n".join(block.text for block in self.content if isinstance(block, TextBlock))

    def __str__(self) -> str:
        return self.text()


# =============================================================================
# Errors
# =============================================================================


class ErrorDetail(BaseModel):
    """Error payload, e.g. ``{"type": "overloaded_error", "message": "..."}``."""

    model_config = ConfigDict(extra="allow")

    type: str
    message: str


class ErrorResponse(BaseModel):
    """Body of a non-2xx response."""

    type: Literal["error"] = "error"
    error: ErrorDetail
