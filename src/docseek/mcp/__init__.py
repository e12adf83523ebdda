"""FastMCP server exposing the search index over HTTP and MCP."""
