"""Tool Adapters.

Available adapters:
- amap: AMap web-service API, split into two MCP servers
  (coordinate/place search and route planning)
"""

__all__ = ["amap"]
