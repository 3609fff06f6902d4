"""Data models for the Anthropic messages endpoint."""

from .cache_control import CacheControl, CacheControlType, CacheTtl
from .claude_model import MAX_OUTPUT_TOKENS, ClaudeModel
from .content import (
    Base64DocumentSource,
    Base64ImageSource,
    ContentBlock,
    DocumentBlock,
    DocumentSource,
    ImageBlock,
    ImageMediaType,
    ImageSource,
    TextBlock,
    TextDocumentSource,
    ToolResultBlock,
    ToolUseBlock,
    UrlDocumentSource,
    UrlImageSource,
)
from .request import Message, MessagesRequest, StreamOption, ToolDefinition
from .response import (
    CacheCreation,
    ErrorDetail,
    ErrorResponse,
    MessagesResponse,
    StopReason,
    Usage,
)
from .stream import (
    EVENT_TYPES,
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    ContentBlockStopEvent,
    ErrorEvent,
    InputJsonDelta,
    MessageDeltaBody,
    MessageDeltaEvent,
    MessageStartEvent,
    MessageStopEvent,
    PingEvent,
    StreamEvent,
    TextDelta,
)
from .system_prompt import SystemPrompt

__all__ = [
    # Cache control
    "CacheControl",
    "CacheControlType",
    "CacheTtl",
    # Models
    "ClaudeModel",
    "MAX_OUTPUT_TOKENS",
    # Content
    "Base64DocumentSource",
    "Base64ImageSource",
    "ContentBlock",
    "DocumentBlock",
    "DocumentSource",
    "ImageBlock",
    "ImageMediaType",
    "ImageSource",
    "TextBlock",
    "TextDocumentSource",
    "ToolResultBlock",
    "ToolUseBlock",
    "UrlDocumentSource",
    "UrlImageSource",
    # System prompt
    "SystemPrompt",
    # Request
    "Message",
    "MessagesRequest",
    "StreamOption",
    "ToolDefinition",
    # Response
    "CacheCreation",
    "ErrorDetail",
    "ErrorResponse",
    "MessagesResponse",
    "StopReason",
    "Usage",
    # Streaming events
    "EVENT_TYPES",
    "ContentBlockDeltaEvent",
    "ContentBlockStartEvent",
    "ContentBlockStopEvent",
    "ErrorEvent",
    "InputJsonDelta",
    "MessageDeltaBody",
    "MessageDeltaEvent",
    "MessageStartEvent",
    "MessageStopEvent",
    "PingEvent",
    "StreamEvent",
    "TextDelta",
]
