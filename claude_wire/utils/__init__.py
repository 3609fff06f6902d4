"""Utility modules."""

from .debug_logger import (
    log_incoming_response,
    log_outgoing_request,
    log_stream_event,
)
from .log_config import reset_logging, setup_logging

__all__ = [
    "log_incoming_response",
    "log_outgoing_request",
    "log_stream_event",
    "reset_logging",
    "setup_logging",
]
