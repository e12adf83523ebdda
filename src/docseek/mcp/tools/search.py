"""Search tools for FastMCP.

Query the in-memory index built at startup. No crawling happens here; the
index is read from state.index.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from fastmcp import FastMCP

from docseek.mcp.routes import json_score
from docseek.search.index import CorpusIndex
from docseek.search.ranker import search as rank_documents


def register_search_tools(mcp: FastMCP, get_state: Callable[[], Any]) -> None:
    """Register index query tools on the given FastMCP instance."""

    def _index(state_obj: Any) -> CorpusIndex:
        index = getattr(state_obj, "index", None)
        if index is None:
            raise RuntimeError("The index has not been built yet.")
        return index

    @mcp.tool
    def search(query: str, k: int = 20) -> List[Dict[str, Any]]:
        """Rank indexed files against `query` by TF-IDF.

        Parameters
        ----------
        query: str
            Free text; it is tokenized and stemmed like the indexed documents.
        k: int
            Maximum number of results (default 20).
        """
        index = _index(get_state())
        ranks = rank_documents(index, query, limit=max(1, int(k)))
        return [{"path": path, "score": json_score(score)} for path, score in ranks]

    @mcp.tool
    def index_stats() -> Dict[str, int]:
        """Return the number of indexed documents and distinct terms."""
        index = _index(get_state())
        return {"documents": index.size(), "terms": len(index.document_frequency)}
