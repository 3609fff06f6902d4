"""System prompt: a plain string or an ordered list of cacheable content blocks.

The service accepts both shapes under the same ``system`` key and nothing in
the payload says which one it is, so the variant is picked by looking at the
outer JSON shape. That check happens in exactly one place
(:meth:`SystemPrompt._pick_variant`); everything else sees a resolved value.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from pydantic import RootModel, model_validator

from .cache_control import CacheControl
from .content import ContentBlock, TextBlock


class SystemPrompt(RootModel[Union[str, List[ContentBlock]]]):
    """Either ``Simple`` (a bare string) or ``Advanced`` (a list of blocks).

    Each advanced block carries its own optional ``cache_control`` which is
    written next to the block's fields on the wire.
    """

    @model_validator(mode="before")
    @classmethod
    def _pick_variant(cls, value: Any) -> Any:
        if isinstance(value, (str, list)):
            return value
        if isinstance(value, tuple):
            return list(value)
        raise ValueError(
            f"system prompt must be a string or an array of content blocks, got {type(value).__name__}"
        )

    # -- constructors ---------------------------------------------------------

    @classmethod
    def simple(cls, text: str) -> "SystemPrompt":
        return cls(text)

    @classmethod
    def advanced(cls, blocks: Iterable[ContentBlock]) -> "SystemPrompt":
        return cls(list(blocks))

    @classmethod
    def from_content_blocks(cls, blocks: Iterable[ContentBlock]) -> "SystemPrompt":
        """Alias of :meth:`advanced`."""
        return cls.advanced(blocks)

    @classmethod
    def from_text_blocks(cls, texts: Iterable[str]) -> "SystemPrompt":
        """Build an advanced prompt of uncached text blocks."""
        return cls([TextBlock(text=text) for text in texts])

    @classmethod
    def from_text_blocks_with_cache_control(
        cls, texts: Sequence[Tuple[str, Optional[CacheControl]]]
    ) -> "SystemPrompt":
        """Build an advanced prompt from ``(text, cache_control)`` pairs."""
        return cls([TextBlock(text=text, cache_control=cache) for text, cache in texts])

    # -- accessors ------------------------------------------------------------

    @property
    def is_simple(self) -> bool:
        return isinstance(self.root, str)

    @property
    def is_advanced(self) -> bool:
        return isinstance(self.root, list)

    @property
    def blocks(self) -> List[ContentBlock]:
        """Content blocks of an advanced prompt; empty for a simple one."""
        return self.root if isinstance(self.root, list) else []

    def __str__(self) -> str:
        if isinstance(self.root, str):
            return self.root
        return "\n".join(str(block) for block in self.root)
