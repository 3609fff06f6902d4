"""Async client for the Anthropic messages endpoint."""

import logging
import uuid
from typing import Dict, Optional, Tuple, Union

import httpx

from ..config import settings
from ..errors import StreamOptionMismatch, TransportError
from ..middleware.auth import ApiKey, auth_headers
from ..middleware.beta import beta_headers
from ..models.request import MessagesRequest, StreamOption
from ..models.response import MessagesResponse
from ..utils.debug_logger import log_incoming_response, log_outgoing_request
from .decode import decode_error_body, decode_response, is_success
from .stream import MessageStream

logger = logging.getLogger(__name__)


def validate_stream_option(request: MessagesRequest, streaming: bool) -> None:
    """Check the request's ``stream`` option against the call being made.

    A buffered call accepts an absent option or ``RETURN_ONCE``; a streaming
    call requires ``RETURN_STREAM``. Raises :class:`StreamOptionMismatch`.
    """
    if streaming:
        if request.stream != StreamOption.RETURN_STREAM:
            raise StreamOptionMismatch(
                f"Streaming call requires stream={StreamOption.RETURN_STREAM.name}, got {request.stream}"
            )
    elif request.stream is not None and request.stream != StreamOption.RETURN_ONCE:
        raise StreamOptionMismatch(
            f"Buffered call requires stream={StreamOption.RETURN_ONCE.name} or unset, got {request.stream}"
        )


class MessagesClient:
    """Client for creating messages, buffered or streamed."""

    def __init__(
        self,
        api_key: Optional[Union[str, ApiKey]] = None,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: API key; falls back to ANTHROPIC_API_KEY
            base_url: Service root, e.g. "https://api.anthropic.com"
            version: Value of the anthropic-version header
            timeout: Request timeout in seconds
            http_client: Preconfigured transport; the caller keeps ownership
        """
        self.api_key = api_key if isinstance(api_key, ApiKey) else ApiKey.from_env(api_key)
        self.base_url = (base_url or settings.ANTHROPIC_BASE_URL).rstrip("/")
        self.version = version or settings.ANTHROPIC_VERSION
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.REQUEST_TIMEOUT
        )

    @classmethod
    def from_env(cls) -> "MessagesClient":
        """Build a client entirely from settings."""
        return cls()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{settings.MESSAGES_PATH}"

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> "MessagesClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def build_headers(self, body: MessagesRequest) -> Dict[str, str]:
        """Headers for ``body``, including any beta it needs."""
        return {**auth_headers(self.api_key, self.version), **beta_headers(body)}

    def _build_request(self, body: MessagesRequest) -> Tuple[httpx.Request, str]:
        request_id = f"req_{uuid.uuid4().hex[:24]}"
        headers = self.build_headers(body)
        log_outgoing_request(
            request_id=request_id,
            method="POST",
            url=self.endpoint,
            headers=headers,
            body=body.to_wire(),
        )
        request = self._http.build_request(
            "POST", self.endpoint, headers=headers, content=body.to_wire_json().encode("utf-8")
        )
        return request, request_id

    async def create_a_message(self, body: MessagesRequest) -> MessagesResponse:
        """Send ``body`` and return the complete response.

        Raises:
            StreamOptionMismatch: body asks for a stream (checked before sending)
            TransportError: the request could not be completed
            ResponseDeserializationError: 2xx body was not a message
            ErrorResponseDeserializationError: error body was not parseable
            ApiError: the service returned an error
        """
        validate_stream_option(body, streaming=False)
        request, request_id = self._build_request(body)
        logger.debug(f"Request {request_id}: model={body.model.value}, stream=False")

        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            logger.error(f"Request {request_id} failed: {e}")
            raise TransportError("Messages request failed", e) from e

        log_incoming_response(request_id, response.status_code, body=response.text)
        return decode_response(response.status_code, response.text)

    async def create_a_message_stream(self, body: MessagesRequest) -> MessageStream:
        """Send ``body`` and return a :class:`MessageStream` over its events.

        Errors before the stream starts are raised here; errors while reading
        it are raised by the stream's iterator.
        """
        validate_stream_option(body, streaming=True)
        request, request_id = self._build_request(body)
        logger.debug(f"Request {request_id}: model={body.model.value}, stream=True")

        try:
            response = await self._http.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.error(f"Request {request_id} failed: {e}")
            raise TransportError("Messages request failed", e) from e

        if not is_success(response.status_code):
            try:
                await response.aread()
            except httpx.HTTPError as e:
                raise TransportError("Failed to read error response", e) from e
            finally:
                await response.aclose()
            log_incoming_response(request_id, response.status_code, body=response.text)
            raise decode_error_body(response.status_code, response.text)

        log_incoming_response(request_id, response.status_code, is_stream=True)
        return MessageStream(response, request_id)
