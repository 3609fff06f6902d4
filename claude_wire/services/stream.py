"""Streaming response decoding.

The messages endpoint streams server-sent events: blank-line terminated
frames holding an ``event:`` line and a JSON ``data:`` line. Chunks from the
transport do not line up with frames, so :class:`EventStreamDecoder` keeps
the unresolved bytes between reads and hands out one typed event per
complete frame. :func:`iter_events` drives it from an async byte source, and
:class:`MessageStream` ties that to the HTTP response it reads from.
"""

import json
import logging
import re
from typing import AsyncIterable, AsyncIterator, Dict, Iterator, List, Optional

import httpx
from pydantic import ValidationError

from ..errors import StreamDecodeError, StreamError, StreamTransportError, TruncatedFrameError
from ..models.content import TextBlock, ToolUseBlock
from ..models.response import MessagesResponse
from ..models.stream import (
    EVENT_TYPES,
    ContentBlockDeltaEvent,
    ContentBlockStartEvent,
    ContentBlockStopEvent,
    ErrorEvent,
    InputJsonDelta,
    MessageDeltaEvent,
    MessageStartEvent,
    MessageStopEvent,
    StreamEvent,
    TextDelta,
)
from ..utils.debug_logger import log_stream_event

logger = logging.getLogger(__name__)

_FRAME_END = re.compile(rb"\r\n\r\n|\n\n|\r\r")
_LINE_END = re.compile(r"\r\n|\r|\n")

# A delimiter can straddle two chunks; rescan this many trailing bytes.
_DELIMITER_OVERLAP = 3


class EventStreamDecoder:
    """Incremental decoder from raw SSE bytes to stream events.

    Not reentrant: one decoder per response. Once an ``error`` frame or a
    decode failure is seen the decoder is closed and ignores further input.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._cursor = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet resolved into a frame."""
        return len(self._buffer)

    def feed(self, chunk: bytes) -> Iterator[StreamEvent]:
        """Buffer ``chunk`` and return an iterator over the events it completes.

        The iterator raises :class:`StreamDecodeError` on a malformed or
        unrecognized frame, after every earlier event has been produced.
        """
        if not self._closed:
            self._buffer.extend(chunk)
        return self._drain()

    def finish(self) -> None:
        """Signal end-of-stream.

        Raises :class:`TruncatedFrameError` if an incomplete frame is left.
        """
        if self._closed:
            return
        remainder = bytes(self._buffer)
        self.close()
        if remainder.strip():
            raise TruncatedFrameError(remainder)

    def close(self) -> None:
        """Drop buffered bytes and stop accepting input."""
        self._closed = True
        self._buffer.clear()
        self._cursor = 0

    # -- internals ------------------------------------------------------------

    def _drain(self) -> Iterator[StreamEvent]:
        while not self._closed:
            frame = self._next_frame()
            if frame is None:
                return
            event = self._decode_frame(frame)
            if event is None:
                continue
            if isinstance(event, ErrorEvent):
                self.close()
            yield event

    def _next_frame(self) -> Optional[bytes]:
        match = _FRAME_END.search(self._buffer, self._cursor)
        if match is None:
            self._cursor = max(0, len(self._buffer) - _DELIMITER_OVERLAP)
            return None
        frame = bytes(self._buffer[: match.start()])
        del self._buffer[: match.end()]
        self._cursor = 0
        return frame

    def _fail(self, message: str, frame: str) -> StreamDecodeError:
        self.close()
        logger.warning(f"Stream decode failed: {message}")
        return StreamDecodeError(message, frame)

    def _decode_frame(self, raw: bytes) -> Optional[StreamEvent]:
        try:
            frame = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise self._fail(f"Frame is not valid UTF-8: {e}", raw.decode("utf-8", errors="replace")) from e

        event_type: Optional[str] = None
        data_lines: List[str] = []
        for line in _LINE_END.split(frame):
            if not line or line.startswith(":"):
                continue
            field, _, value = line.partition(":")
            if value.startswith(" "):
                value = value[1:]
            if field == "event":
                event_type = value
            elif field == "data":
                data_lines.append(value)
            # id and retry fields carry nothing for this endpoint

        if event_type is None and not data_lines:
            return None
        if not data_lines:
            raise self._fail(f"Frame for event {event_type!r} has no data line", frame)

        try:
            payload = json.loads("\n".join(data_lines))
        except json.JSONDecodeError as e:
            raise self._fail(f"Frame data is not valid JSON: {e}", frame) from e

        if event_type is None and isinstance(payload, dict):
            event_type = payload.get("type")

        model = EVENT_TYPES.get(event_type) if event_type else None
        if model is None:
            raise self._fail(f"Unknown stream event type: {event_type!r}", frame)

        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise self._fail(f"Invalid {event_type} event: {e}", frame) from e


async def iter_events(
    chunks: AsyncIterable[bytes],
    request_id: Optional[str] = None,
) -> AsyncIterator[StreamEvent]:
    """Decode an async byte source into stream events, in arrival order.

    The sequence ends after an ``error`` event, at a clean end-of-stream, or
    by raising a :class:`StreamError`. Closing the generator early releases
    the buffer and closes ``chunks`` when it supports ``aclose``.
    """
    decoder = EventStreamDecoder()
    event_index = 0
    try:
        try:
            async for chunk in chunks:
                for event in decoder.feed(chunk):
                    event_index += 1
                    if request_id:
                        log_stream_event(request_id, event_index, event.type, event.model_dump(mode="json"))
                    yield event
                if decoder.closed:
                    break
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.error(f"Stream transport error after {event_index} events: {e}")
            raise StreamTransportError(e) from e
        decoder.finish()
    finally:
        decoder.close()
        aclose = getattr(chunks, "aclose", None)
        if aclose is not None:
            await aclose()


class MessageAccumulator:
    """Fold stream events into the final :class:`MessagesResponse`."""

    def __init__(self) -> None:
        self._message: Optional[MessagesResponse] = None
        self._partial_json: Dict[int, List[str]] = {}
        self.stopped = False

    @property
    def message(self) -> MessagesResponse:
        if self._message is None:
            raise StreamDecodeError("No message_start event received")
        return self._message

    def add(self, event: StreamEvent) -> None:
        if isinstance(event, MessageStartEvent):
            self._message = event.message.model_copy(deep=True)
        elif isinstance(event, ContentBlockStartEvent):
            content = self.message.content
            if event.index != len(content):
                raise StreamDecodeError(
                    f"content_block_start index {event.index} out of order (expected {len(content)})"
                )
            content.append(event.content_block.model_copy(deep=True))
        elif isinstance(event, ContentBlockDeltaEvent):
            self._apply_delta(event)
        elif isinstance(event, ContentBlockStopEvent):
            parts = self._partial_json.pop(event.index, None)
            block = self._block(event.index)
            if parts and isinstance(block, ToolUseBlock):
                try:
                    block.input = json.loads("".join(parts))
                except json.JSONDecodeError as e:
                    raise StreamDecodeError(f"Tool input for block {event.index} is not valid JSON: {e}") from e
        elif isinstance(event, MessageDeltaEvent):
            message = self.message
            message.stop_reason = event.delta.stop_reason
            message.stop_sequence = event.delta.stop_sequence
            if event.usage is not None:
                message.usage = message.usage.merge(event.usage)
        elif isinstance(event, MessageStopEvent):
            self.stopped = True

    def _block(self, index: int):
        content = self.message.content
        if not 0 <= index < len(content):
            raise StreamDecodeError(f"Event refers to unknown content block {index}")
        return content[index]

    def _apply_delta(self, event: ContentBlockDeltaEvent) -> None:
        block = self._block(event.index)
        if isinstance(event.delta, TextDelta) and isinstance(block, TextBlock):
            block.text += event.delta.text
        elif isinstance(event.delta, InputJsonDelta) and isinstance(block, ToolUseBlock):
            self._partial_json.setdefault(event.index, []).append(event.delta.partial_json)
        else:
            raise StreamDecodeError(
                f"{event.delta.type} cannot be applied to a {block.type} block (index {event.index})"
            )


class MessageStream:
    """Events of one streaming response.

    Iterate with ``async for``; the stream can be consumed only once. Use it
    as an async context manager (or call :meth:`aclose`) so the underlying
    HTTP response is released even when iteration stops early.
    """

    def __init__(self, response: httpx.Response, request_id: str):
        self.response = response
        self.request_id = request_id
        self.error_event: Optional[ErrorEvent] = None
        self._events = iter_events(response.aiter_bytes(), request_id=request_id)
        self._accumulator = MessageAccumulator()
        self._consumed = False

    def __aiter__(self) -> AsyncIterator[StreamEvent]:
        if self._consumed:
            raise RuntimeError("MessageStream can only be iterated once")
        self._consumed = True
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[StreamEvent]:
        try:
            async for event in self._events:
                if isinstance(event, ErrorEvent):
                    self.error_event = event
                else:
                    self._accumulator.add(event)
                yield event
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        await self._events.aclose()
        await self.response.aclose()

    async def __aenter__(self) -> "MessageStream":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def get_final_message(self) -> MessagesResponse:
        """Consume the rest of the stream and return the assembled message.

        Raises :class:`StreamError` if the stream reported an error or ended
        (or was abandoned) before ``message_stop``.
        """
        if not self._consumed:
            async for _ in self:
                pass
        if self.error_event is not None:
            error = self.error_event.error
            raise StreamError(f"Stream ended with {error.type}: {error.message}")
        if not self._accumulator.stopped:
            raise StreamError("Stream closed before message_stop; the message is incomplete")
        return self._accumulator.message
