"""Pytest configuration and fixtures for claude-wire tests."""

import json
import os
import sys
from typing import Any, Callable, Dict, List

import httpx
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from claude_wire.models import ClaudeModel, Message, MessagesRequest, StreamOption
from claude_wire.services.client import MessagesClient

# Fake credentials, never sent anywhere
TEST_API_KEY = "sk-ant-test-0123456789"

# Base URL for mocked transports
BASE_URL = "http://test"

TEST_MODEL = ClaudeModel.CLAUDE_SONNET_4_5_20250929


def sse_frame(event_type: str, data: Dict[str, Any], newline: str = "\n") -> bytes:
    """Encode one server-sent event frame."""
    body = f"event: {event_type}{newline}data: {json.dumps(data)}{newline}{newline}"
    return body.encode("utf-8")


def message_payload(**overrides: Any) -> Dict[str, Any]:
    """A complete buffered response body."""
    payload = {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": "Hello!"}],
        "model": TEST_MODEL.value,
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 12, "output_tokens": 3},
    }
    payload.update(overrides)
    return payload


def error_payload(error_type: str = "overloaded_error", message: str = "Overloaded") -> Dict[str, Any]:
    return {"type": "error", "error": {"type": error_type, "message": message}}


# The minimal well-formed stream for a one-block text reply
TEXT_STREAM_EVENTS = [
    (
        "message_start",
        {
            "type": "message_start",
            "message": message_payload(content=[], stop_reason=None, usage={"input_tokens": 12, "output_tokens": 1}),
        },
    ),
    (
        "content_block_start",
        {"type": "content_block_start", "index": 0, "content_block": {"type": "text", "text": ""}},
    ),
    (
        "content_block_delta",
        {"type": "content_block_delta", "index": 0, "delta": {"type": "text_delta", "text": "Hello"}},
    ),
    ("content_block_stop", {"type": "content_block_stop", "index": 0}),
    (
        "message_delta",
        {
            "type": "message_delta",
            "delta": {"stop_reason": "end_turn", "stop_sequence": None},
            "usage": {"output_tokens": 5},
        },
    ),
    ("message_stop", {"type": "message_stop"}),
]


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def text_stream_bytes() -> bytes:
    """Wire bytes of :data:`TEXT_STREAM_EVENTS`."""
    return b"".join(sse_frame(event_type, data) for event_type, data in TEXT_STREAM_EVENTS)


@pytest.fixture
def simple_request() -> MessagesRequest:
    """Buffered request with a plain text turn."""
    return MessagesRequest(
        model=TEST_MODEL,
        max_tokens=100,
        messages=[Message.user("Say 'test' and nothing else")],
    )


@pytest.fixture
def streaming_request() -> MessagesRequest:
    """Same as simple_request but asking for a stream."""
    return MessagesRequest(
        model=TEST_MODEL,
        max_tokens=100,
        messages=[Message.user("Say 'hello' and nothing else")],
        stream=StreamOption.RETURN_STREAM,
    )


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    """Requests seen by the mock transport."""
    return []


@pytest.fixture
def make_client(recorded_requests: List[httpx.Request]) -> Callable[..., MessagesClient]:
    """Build a MessagesClient whose transport is answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> MessagesClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return MessagesClient(api_key=TEST_API_KEY, base_url=BASE_URL, http_client=http_client)

    return _make
