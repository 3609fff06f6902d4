"""Buffered (non-streaming) response decoding."""

import logging

from pydantic import ValidationError

from ..errors import (
    ApiError,
    ErrorResponseDeserializationError,
    ResponseDeserializationError,
)
from ..models.response import ErrorResponse, MessagesResponse

logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def decode_error_body(status_code: int, text: str) -> ApiError:
    """Parse an error body into an :class:`ApiError` (returned, not raised).

    Raises :class:`ErrorResponseDeserializationError` if the body itself is
    not a valid error document.
    """
    try:
        error_response = ErrorResponse.model_validate_json(text)
    except ValidationError as e:
        logger.warning(f"Unparseable error body (status {status_code}): {e.error_count()} error(s)")
        raise ErrorResponseDeserializationError(text, e) from e
    return ApiError(status_code, error_response)


def decode_response(status_code: int, text: str) -> MessagesResponse:
    """Decode a complete response body.

    The schema is picked from the status code alone: 2xx bodies must be a
    message, anything else must be an error document and is raised as
    :class:`ApiError`.
    """
    if not is_success(status_code):
        raise decode_error_body(status_code, text)

    try:
        return MessagesResponse.model_validate_json(text)
    except ValidationError as e:
        logger.warning(f"Unparseable response body (status {status_code}): {e.error_count()} error(s)")
        raise ResponseDeserializationError(text, e) from e
