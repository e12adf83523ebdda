"""Docseek server entrypoint using FastMCP.

Exposes the search index as MCP tools and, on the http/sse transports, the
browser UI routes (see `docseek.mcp.routes`).
Run with:
  - docseek <directory>
  - or: python -m docseek <directory>
"""
from __future__ import annotations

import logging
from typing import Optional

from fastmcp import FastMCP

from docseek.config import Settings
from docseek.mcp.routes import register_search_routes
from docseek.mcp.tools import register_search_tools
from docseek.search.index import CorpusIndex

logger = logging.getLogger(__name__)


class AppState:
    """Application state shared by MCP tools and HTTP routes."""

    def __init__(self, settings: Settings, index: Optional[CorpusIndex] = None) -> None:
        self.settings = settings
        self.index = index


# Global state and server instance
_state: Optional[AppState] = None
mcp = FastMCP("Docseek Server")


# ----- Tools -----

@mcp.tool
def health() -> str:
    """Simple health check tool."""
    return "ok"


# ----- Entrypoint -----

def serve(state: AppState) -> None:
    """Install `state` and run the server until interrupted."""
    global _state
    _state = state
    register_search_tools(mcp, get_state=lambda: _state)
    register_search_routes(mcp, get_state=lambda: _state)
    # Choose transport based on configuration: http (default), sse, or stdio
    app = state.settings.app
    if app.transport in ("http", "sse"):
        logger.info("listening on <http://%s:%d/>", app.host, app.port)
        mcp.run(transport=app.transport, host=app.host, port=app.port)
    else:
        mcp.run()
