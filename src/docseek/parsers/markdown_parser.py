"""Markdown parser that converts Markdown/MDX into a ParsedDocument.

Implementation note: we convert Markdown to HTML using the `markdown` library
(extensions enabled for tables and fenced code), then reuse `HTMLParser`
logic to extract text for consistency with other sources.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import markdown as md  # type: ignore[import-untyped]

from docseek.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument
from .html_parser import HTMLParser


class MarkdownParser(BaseParser):
    """Parser for `.md` and `.mdx` files or content strings."""

    extensions = frozenset({".md", ".mdx", ".markdown"})

    def __init__(self) -> None:
        self._html = HTMLParser()
        self._extensions = ["tables", "fenced_code", "sane_lists"]

    def parse(self, path: Path) -> ParsedDocument:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParsingError(f"{path} is not valid UTF-8") from exc
        return self.parse_markdown_content(text, metadata={"source_path": str(path)})

    def parse_markdown_content(
        self, markdown_text: str, *, metadata: Optional[Dict[str, Any]] = None
    ) -> ParsedDocument:
        html = md.markdown(markdown_text, extensions=self._extensions)
        return self._html.parse_html_content(html, metadata=metadata or {})
