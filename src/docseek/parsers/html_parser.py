"""HTML parser for converting HTML content into a `ParsedDocument` with the
visible text extracted.

File-based parsing is supported for `.html`/`.htm` files via `parse()`;
`parse_html_content()` accepts an in-memory string and is reused by the
Markdown parser.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup  # type: ignore[import-untyped]

from docseek.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument


class HTMLParser(BaseParser):
    """Parser for HTML content."""

    extensions = frozenset({".html", ".htm"})

    def parse(self, path: Path) -> ParsedDocument:
        """Parse an HTML file from disk."""
        try:
            html = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParsingError(f"{path} is not valid UTF-8") from exc
        return self.parse_html_content(html, metadata={"source_path": str(path)})

    def parse_html_content(
        self, html: str, *, metadata: Optional[Dict[str, Any]] = None
    ) -> ParsedDocument:
        """Parse HTML string content into a `ParsedDocument`.

        Script and style bodies are dropped; the remaining text nodes are
        joined with single spaces.
        """
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(["script", "style"]):
            tag.decompose()
        text = soup.get_text(" ", strip=True)
        return ParsedDocument(text=text, metadata=metadata or {})
