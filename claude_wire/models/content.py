"""Anthropic content blocks for messages and system prompts."""

import base64
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from .cache_control import CacheControl


class _Block(BaseModel):
    """Shared rendering for content blocks.

    An unset ``cache_control`` is left off the wire however the block is dumped.
    """

    @model_serializer(mode="wrap")
    def _omit_missing_cache_control(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if getattr(self, "cache_control", None) is None:
            data.pop("cache_control", None)
        return data

    def __str__(self) -> str:
        return self.model_dump_json(exclude_none=True)


# =============================================================================
# Text Block
# =============================================================================


class TextBlock(_Block):
    """Anthropic text content block."""

    type: Literal["text"] = "text"
    text: str
    cache_control: Optional[CacheControl] = None

    def __str__(self) -> str:
        return self.text


# =============================================================================
# Image Block
# =============================================================================


class ImageMediaType(str, Enum):
    """Image formats accepted by the vision endpoint."""

    JPEG = "image/jpeg"
    PNG = "image/png"
    GIF = "image/gif"
    WEBP = "image/webp"

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ImageMediaType":
        """Guess the media type from a file extension."""
        suffix = Path(path).suffix.lower()
        try:
            return _SUFFIX_TO_MEDIA_TYPE[suffix]
        except KeyError:
            raise ValueError(f"Unsupported image extension: {suffix or '<none>'}") from None


_SUFFIX_TO_MEDIA_TYPE = {
    ".jpg": ImageMediaType.JPEG,
    ".jpeg": ImageMediaType.JPEG,
    ".png": ImageMediaType.PNG,
    ".gif": ImageMediaType.GIF,
    ".webp": ImageMediaType.WEBP,
}


class Base64ImageSource(BaseModel):
    """Anthropic base64 image source."""

    type: Literal["base64"] = "base64"
    media_type: ImageMediaType
    data: str

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "Base64ImageSource":
        """Read an image file and encode it."""
        data = Path(path).read_bytes()
        return cls(
            media_type=ImageMediaType.from_path(path),
            data=base64.b64encode(data).decode("ascii"),
        )


class UrlImageSource(BaseModel):
    """Anthropic URL image source."""

    type: Literal["url"] = "url"
    url: str


ImageSource = Annotated[Union[Base64ImageSource, UrlImageSource], Field(discriminator="type")]


class ImageBlock(_Block):
    """Anthropic image content block."""

    type: Literal["image"] = "image"
    source: ImageSource
    cache_control: Optional[CacheControl] = None


# =============================================================================
# Document Block
# =============================================================================


class Base64DocumentSource(BaseModel):
    """Anthropic base64 document source (PDF)."""

    type: Literal["base64"] = "base64"
    media_type: Literal["application/pdf"] = "application/pdf"
    data: str


class UrlDocumentSource(BaseModel):
    """Anthropic URL document source."""

    type: Literal["url"] = "url"
    url: str


class TextDocumentSource(BaseModel):
    """Anthropic plain text document source."""

    type: Literal["text"] = "text"
    media_type: Literal["text/plain"] = "text/plain"
    data: str


DocumentSource = Annotated[
    Union[Base64DocumentSource, UrlDocumentSource, TextDocumentSource],
    Field(discriminator="type"),
]


class DocumentBlock(_Block):
    """Anthropic document content block."""

    type: Literal["document"] = "document"
    source: DocumentSource
    title: Optional[str] = None
    context: Optional[str] = None
    cache_control: Optional[CacheControl] = None


# =============================================================================
# Tool Use Block (assistant turn)
# =============================================================================


class ToolUseBlock(_Block):
    """Anthropic tool_use content block."""

    type: Literal["tool_use"] = "tool_use"
    id: str  # e.g., "toolu_01abc..."
    name: str
    input: Dict[str, Any] = Field(default_factory=dict)
    cache_control: Optional[CacheControl] = None


# =============================================================================
# Tool Result Block (user turn)
# =============================================================================


class ToolResultBlock(_Block):
    """Anthropic tool_result content block."""

    type: Literal["tool_result"] = "tool_result"
    tool_use_id: str
    content: Optional[Union[str, List[Dict[str, Any]]]] = None
    is_error: Optional[bool] = None
    cache_control: Optional[CacheControl] = None


# =============================================================================
# Union Type
# =============================================================================


ContentBlock = Annotated[
    Union[TextBlock, ImageBlock, DocumentBlock, ToolUseBlock, ToolResultBlock],
    Field(discriminator="type"),
]
