"""MCP server entry point"""
