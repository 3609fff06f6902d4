"""Errors raised by the messages client.

Every failure is a :class:`MessagesError`. The branches tell the stage apart:

* :class:`StreamOptionMismatch` - the request's ``stream`` option does not fit
  the call that was made; raised before any I/O.
* :class:`ClientError` - the exchange itself failed: :class:`TransportError`
  when the network call did not complete, :class:`ResponseDecodeError` when a
  body came back but could not be parsed.
* :class:`ApiError` - the service answered with a well-formed error.
* :class:`StreamError` - a streaming response broke after it started.
"""

from typing import Optional

from pydantic import ValidationError

from .models.response import ErrorResponse


class MessagesError(Exception):
    """Base class for all messages client failures."""


class StreamOptionMismatch(MessagesError):
    """The request's ``stream`` option disagrees with the decode mode requested."""


# =============================================================================
# Client errors
# =============================================================================


class ClientError(MessagesError):
    """The HTTP exchange failed or returned something unreadable."""


class TransportError(ClientError):
    """The transport could not complete the request or read the body."""

    def __init__(self, message: str, error: Exception):
        super().__init__(f"{message}: {error}")
        self.error = error


class ResponseDecodeError(ClientError):
    """A response body could not be deserialized.

    ``text`` holds the raw body so callers can inspect the unexpected payload.
    """

    def __init__(self, message: str, text: str, error: ValidationError):
        super().__init__(f"{message}: {error}")
        self.text = text
        self.error = error


class ResponseDeserializationError(ResponseDecodeError):
    """A 2xx body did not match the success schema."""

    def __init__(self, text: str, error: ValidationError):
        super().__init__("Failed to deserialize response body", text, error)


class ErrorResponseDeserializationError(ResponseDecodeError):
    """A non-2xx body did not match the error schema."""

    def __init__(self, text: str, error: ValidationError):
        super().__init__("Failed to deserialize error response body", text, error)


# =============================================================================
# API errors
# =============================================================================


class ApiError(MessagesError):
    """The service returned an error status with a parseable error body."""

    def __init__(self, status_code: int, error_response: ErrorResponse):
        self.status_code = status_code
        self.error_response = error_response
        super().__init__(
            f"API error {status_code} ({error_response.error.type}): {error_response.error.message}"
        )

    @property
    def error_type(self) -> str:
        return self.error_response.error.type


# =============================================================================
# Stream errors
# =============================================================================


class StreamError(MessagesError):
    """A streaming response could not be decoded to the end."""


class StreamDecodeError(StreamError):
    """A frame was malformed or carried an unrecognized event type."""

    def __init__(self, message: str, frame: Optional[str] = None):
        super().__init__(message)
        self.frame = frame


class TruncatedFrameError(StreamDecodeError):
    """The stream ended in the middle of a frame."""

    def __init__(self, raw: bytes):
        super().__init__(
            f"Stream ended with an incomplete frame ({len(raw)} bytes)",
            raw.decode("utf-8", errors="replace"),
        )
        self.size = len(raw)


class StreamTransportError(StreamError):
    """The transport failed while the stream was being read."""

    def __init__(self, error: Exception):
        super().__init__(f"Stream read failed: {error}")
        self.error = error
