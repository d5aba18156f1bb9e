"""MCP server exposing Claude's built-in web search as a tool."""

__version__ = "1.0.0"
