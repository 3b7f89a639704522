"""
AMap MCP Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from amap_config.settings import Settings

__all__ = ["Settings"]
