"""
AMap MCP Observability Package.

Provides:
- Structured logging (structlog) on stderr
"""

__all__ = ["logging"]
