"""Anthropic messages request models."""

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..config import settings
from .claude_model import ClaudeModel
from .content import ContentBlock
from .system_prompt import SystemPrompt


class Message(BaseModel):
    """Anthropic message format."""

    role: Literal["user", "assistant"]
    content: Union[str, List[ContentBlock]]

    @classmethod
    def user(cls, content: Union[str, List[ContentBlock]]) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: Union[str, List[ContentBlock]]) -> "Message":
        return cls(role="assistant", content=content)

    @property
    def blocks(self) -> List[ContentBlock]:
        """Content blocks of the turn; empty when content is a plain string."""
        return self.content if isinstance(self.content, list) else []


class StreamOption(Enum):
    """Response mode. Serialized as the boolean ``stream`` field."""

    RETURN_ONCE = False
    RETURN_STREAM = True


class ToolDefinition(BaseModel):
    """Anthropic tool definition format."""

    name: str
    description: Optional[str] = None
    input_schema: Dict[str, Any] = Field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )


class MessagesRequest(BaseModel):
    """Anthropic Messages API request body.

    ``max_tokens`` is checked against the model's output ceiling whenever the
    model is built or a field is reassigned, so an oversized budget never
    reaches the wire.
    """

    model_config = ConfigDict(validate_assignment=True)

    model: ClaudeModel
    max_tokens: int = Field(gt=0)
    messages: List[Message] = Field(min_length=1)
    system: Optional[SystemPrompt] = None
    stream: Optional[StreamOption] = None
    prompt_cache: Optional[bool] = None

    # Pass-through sampling and tool options
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    stop_sequences: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    tools: Optional[List[ToolDefinition]] = None
    tool_choice: Optional[Dict[str, Any]] = None  # auto, any, tool, none

    @field_validator("model", mode="before")
    @classmethod
    def _resolve_alias(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, ClaudeModel):
            return settings.resolve_model(value)
        return value

    @model_validator(mode="after")
    def _check_max_tokens(self) -> "MessagesRequest":
        ceiling = self.model.max_tokens
        if self.max_tokens > ceiling:
            raise ValueError(
                f"max_tokens={self.max_tokens} exceeds the {self.model.value} ceiling of {ceiling}"
            )
        return self

    @property
    def is_streaming(self) -> bool:
        return self.stream == StreamOption.RETURN_STREAM

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready request body with unset optional fields dropped."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_wire_json(self) -> str:
        """Compact JSON encoding of :meth:`to_wire`."""
        return self.model_dump_json(exclude_none=True)
