"""Kroki MCP server: render diagrams through a Kroki service"""
__version__ = "1.0.0"
