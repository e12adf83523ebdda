"""HTTP routes for the browser front end, mounted on the FastMCP app.

- POST /api/search  body: raw UTF-8 query; returns `[[path, score], ...]`
- GET  /script.js   bundled front-end script
- anything else     bundled query page (registered last so the routes above win)
"""

from __future__ import annotations

import json
import logging
import math
from importlib import resources
from typing import Any, Callable, List, Optional, Sequence, Tuple

from fastmcp import FastMCP
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from docseek.search.ranker import search

logger = logging.getLogger(__name__)

DEFAULT_RESULT_LIMIT = 20
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def json_score(score: float) -> Optional[float]:
    """JSON has no infinities; non-finite scores become null."""
    return score if math.isfinite(score) else None


def ranking_payload(ranks: Sequence[Tuple[str, float]]) -> List[List[Any]]:
    return [[path, json_score(score)] for path, score in ranks]


def _static(name: str) -> bytes:
    return resources.files("docseek.mcp").joinpath("static").joinpath(name).read_bytes()


def _serve_400(message: str) -> Response:
    return PlainTextResponse(f"400: {message}", status_code=400)


def _serve_500() -> Response:
    return PlainTextResponse("500", status_code=500)


def register_search_routes(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register the search API and static asset routes on `mcp`.

    Reads the index from state.index and the result limit from
    state.settings.search.result_limit.
    """

    script = _static("script.js")
    page = _static("index.html")

    @mcp.custom_route("/api/search", methods=["POST"])
    async def api_search(request: Request) -> Response:
        try:
            body = await request.body()
        except Exception as exc:  # noqa: BLE001
            logger.error("could not read the body of the request: %s", exc)
            return _serve_500()

        try:
            query = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.error("could not interpret body as UTF-8 string: %s", exc)
            return _serve_400("body must be a valid UTF-8 string")

        state = get_state()
        index = getattr(state, "index", None)
        if index is None:
            logger.error("search requested before the index was built")
            return _serve_500()
        settings = getattr(state, "settings", None)
        limit = getattr(getattr(settings, "search", None), "result_limit", DEFAULT_RESULT_LIMIT)

        ranks = await run_in_threadpool(search, index, query, limit=limit)
        try:
            payload = json.dumps(ranking_payload(ranks), allow_nan=False)
        except (TypeError, ValueError) as exc:
            logger.error("could not serialize search results: %s", exc)
            return _serve_500()
        return Response(payload, media_type="application/json")

    @mcp.custom_route("/script.js", methods=["GET"])
    async def script_js(request: Request) -> Response:  # noqa: ARG001
        return Response(script, media_type="text/javascript; charset=UTF-8")

    @mcp.custom_route("/{path:path}", methods=ANY_METHOD)
    async def index_page(request: Request) -> Response:  # noqa: ARG001
        return Response(page, media_type="text/html; charset=UTF-8")
