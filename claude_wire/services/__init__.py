"""Request dispatch and response decoding."""

from .client import MessagesClient, validate_stream_option
from .decode import decode_error_body, decode_response
from .stream import EventStreamDecoder, MessageAccumulator, MessageStream, iter_events

__all__ = [
    "MessagesClient",
    "validate_stream_option",
    "decode_error_body",
    "decode_response",
    "EventStreamDecoder",
    "MessageAccumulator",
    "MessageStream",
    "iter_events",
]
