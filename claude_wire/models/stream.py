"""Streaming events of the messages endpoint."""

from typing import Annotated, Dict, Literal, Optional, Type, Union

from pydantic import BaseModel, Field

from .content import ContentBlock
from .response import ErrorDetail, MessagesResponse, StopReason, Usage


class MessageStartEvent(BaseModel):
    """message_start event data."""

    type: Literal["message_start"] = "message_start"
    message: MessagesResponse


class ContentBlockStartEvent(BaseModel):
    """content_block_start event data."""

    type: Literal["content_block_start"] = "content_block_start"
    index: int
    content_block: ContentBlock


class TextDelta(BaseModel):
    """Text delta for content_block_delta."""

    type: Literal["text_delta"] = "text_delta"
    text: str


class InputJsonDelta(BaseModel):
    """Input JSON delta for streaming tool_use input."""

    type: Literal["input_json_delta"] = "input_json_delta"
    partial_json: str


Delta = Annotated[Union[TextDelta, InputJsonDelta], Field(discriminator="type")]


class ContentBlockDeltaEvent(BaseModel):
    """content_block_delta event data."""

    type: Literal["content_block_delta"] = "content_block_delta"
    index: int
    delta: Delta


class ContentBlockStopEvent(BaseModel):
    """content_block_stop event data."""

    type: Literal["content_block_stop"] = "content_block_stop"
    index: int


class MessageDeltaBody(BaseModel):
    """Top-level message changes carried by message_delta."""

    stop_reason: Optional[StopReason] = None
    stop_sequence: Optional[str] = None


class MessageDeltaEvent(BaseModel):
    """message_delta event data."""

    type: Literal["message_delta"] = "message_delta"
    delta: MessageDeltaBody
    usage: Optional[Usage] = None


class MessageStopEvent(BaseModel):
    """message_stop event data."""

    type: Literal["message_stop"] = "message_stop"


class PingEvent(BaseModel):
    """Keep-alive event."""

    type: Literal["ping"] = "ping"


class ErrorEvent(BaseModel):
    """error event data. Always the last event of a stream."""

    type: Literal["error"] = "error"
    error: ErrorDetail


StreamEvent = Annotated[
    Union[
        MessageStartEvent,
        ContentBlockStartEvent,
        ContentBlockDeltaEvent,
        ContentBlockStopEvent,
        MessageDeltaEvent,
        MessageStopEvent,
        PingEvent,
        ErrorEvent,
    ],
    Field(discriminator="type"),
]

EVENT_TYPES: Dict[str, Type[BaseModel]] = {
    "message_start": MessageStartEvent,
    "content_block_start": ContentBlockStartEvent,
    "content_block_delta": ContentBlockDeltaEvent,
    "content_block_stop": ContentBlockStopEvent,
    "message_delta": MessageDeltaEvent,
    "message_stop": MessageStopEvent,
    "ping": PingEvent,
    "error": ErrorEvent,
}
