"""Tests for cache_control serialization."""

import json

import pytest
from pydantic import ValidationError

from claude_wire.models import CacheControl, CacheControlType, CacheTtl


class TestCacheControlWire:
    """Test the wire form of cache directives."""

    def test_ttl_omitted_when_missing(self):
        """A directive without ttl has no ttl key at all."""
        assert json.loads(CacheControl().model_dump_json()) == {"type": "ephemeral"}
        assert CacheControl().model_dump() == {"type": "ephemeral"}

    @pytest.mark.parametrize("ttl,expected", [
        (CacheTtl.FIVE_MINUTES, "5m"),
        (CacheTtl.ONE_HOUR, "1h"),
    ])
    def test_ttl_tokens(self, ttl: CacheTtl, expected: str):
        """TTL values use the service's duration tokens."""
        data = json.loads(CacheControl.ephemeral(ttl).model_dump_json())
        assert data == {"type": "ephemeral", "ttl": expected}

    def test_parse_from_wire(self):
        """Parsing accepts both the short and the full form."""
        assert CacheControl.model_validate({"type": "ephemeral"}) == CacheControl()
        parsed = CacheControl.model_validate({"type": "ephemeral", "ttl": "1h"})
        assert parsed.ttl == CacheTtl.ONE_HOUR
        assert parsed.type == CacheControlType.EPHEMERAL

    def test_unknown_ttl_rejected(self):
        """Only 5m and 1h are valid TTLs."""
        with pytest.raises(ValidationError):
            CacheControl.model_validate({"type": "ephemeral", "ttl": "2h"})

    def test_unknown_type_rejected(self):
        """Only the ephemeral kind exists."""
        with pytest.raises(ValidationError):
            CacheControl.model_validate({"type": "persistent"})


class TestCacheControlHelpers:
    """Test convenience accessors."""

    def test_is_one_hour(self):
        assert CacheControl.ephemeral(CacheTtl.ONE_HOUR).is_one_hour
        assert not CacheControl.ephemeral(CacheTtl.FIVE_MINUTES).is_one_hour
        assert not CacheControl.ephemeral().is_one_hour
