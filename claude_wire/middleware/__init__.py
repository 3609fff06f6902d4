"""Request header assembly: authentication and beta negotiation."""

from .auth import ApiKey, MissingApiKeyError, auth_headers, mask_headers
from .beta import BETA_HEADER, Beta, beta_headers, has_one_hour_ttl

__all__ = [
    "ApiKey",
    "MissingApiKeyError",
    "auth_headers",
    "mask_headers",
    "BETA_HEADER",
    "Beta",
    "beta_headers",
    "has_one_hour_ttl",
]
