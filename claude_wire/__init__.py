"""Client-side data and protocol layer for the Anthropic messages API."""

from .errors import (
    ApiError,
    ClientError,
    ErrorResponseDeserializationError,
    MessagesError,
    ResponseDecodeError,
    ResponseDeserializationError,
    StreamDecodeError,
    StreamError,
    StreamOptionMismatch,
    StreamTransportError,
    TransportError,
    TruncatedFrameError,
)
from .middleware import ApiKey, Beta, beta_headers, has_one_hour_ttl
from .models import (
    CacheControl,
    CacheControlType,
    CacheTtl,
    ClaudeModel,
    ContentBlock,
    ImageBlock,
    Message,
    MessagesRequest,
    MessagesResponse,
    StreamEvent,
    StreamOption,
    SystemPrompt,
    TextBlock,
    Usage,
)
from .services import (
    EventStreamDecoder,
    MessagesClient,
    MessageStream,
    decode_response,
    iter_events,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "MessagesClient",
    "MessageStream",
    "EventStreamDecoder",
    "decode_response",
    "iter_events",
    # Headers
    "ApiKey",
    "Beta",
    "beta_headers",
    "has_one_hour_ttl",
    # Models
    "CacheControl",
    "CacheControlType",
    "CacheTtl",
    "ClaudeModel",
    "ContentBlock",
    "ImageBlock",
    "Message",
    "MessagesRequest",
    "MessagesResponse",
    "StreamEvent",
    "StreamOption",
    "SystemPrompt",
    "TextBlock",
    "Usage",
    # Errors
    "ApiError",
    "ClientError",
    "ErrorResponseDeserializationError",
    "MessagesError",
    "ResponseDecodeError",
    "ResponseDeserializationError",
    "StreamDecodeError",
    "StreamError",
    "StreamOptionMismatch",
    "StreamTransportError",
    "TransportError",
    "TruncatedFrameError",
]
