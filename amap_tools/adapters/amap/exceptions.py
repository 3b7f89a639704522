"""AMap adapter exceptions.

Custom exception hierarchy for AMap configuration and API errors.
"""

from amap_tools.exceptions import UpstreamError


class AmapAdapterError(Exception):
    """Base exception for AMap adapter."""

    pass


class AmapConfigError(AmapAdapterError):
    """Required configuration (API key) is missing."""

    pass


class AmapAPIError(AmapAdapterError, UpstreamError):
    """Upstream request failed (network, transport, or unparseable body)."""

    pass
