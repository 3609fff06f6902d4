"""Prompt caching directives attached to content blocks."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, SerializerFunctionWrapHandler, model_serializer


class CacheControlType(str, Enum):
    """Kind of cache directive. The service currently defines only one."""

    EPHEMERAL = "ephemeral"


class CacheTtl(str, Enum):
    """Cache lifetime. A 1 hour TTL requires the extended-cache-ttl beta."""

    FIVE_MINUTES = "5m"
    ONE_HOUR = "1h"


class CacheControl(BaseModel):
    """Anthropic cache_control object: ``{"type": "ephemeral", "ttl"?: "5m" | "1h"}``.

    A missing ``ttl`` means "use the service default" and is never written
    to the wire, regardless of how the caller dumps the model.
    """

    type: CacheControlType = CacheControlType.EPHEMERAL
    ttl: Optional[CacheTtl] = None

    @model_serializer(mode="wrap")
    def _omit_missing_ttl(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        if self.ttl is None:
            data.pop("ttl", None)
        return data

    @classmethod
    def ephemeral(cls, ttl: Optional[CacheTtl] = None) -> "CacheControl":
        """Build an ephemeral directive with an optional TTL."""
        return cls(ttl=ttl)

    @property
    def is_one_hour(self) -> bool:
        return self.ttl == CacheTtl.ONE_HOUR
