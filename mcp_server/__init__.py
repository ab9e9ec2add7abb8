"""MCP server exposing the transcriber as tools."""
