"""API v1 routes"""
from kroki_mcp.api.v1 import diagrams

__all__ = ["diagrams"]
