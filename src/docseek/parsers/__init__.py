"""Document parsers and extension-based dispatch."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .base_parser import BaseParser, ParsedDocument
from .html_parser import HTMLParser
from .markdown_parser import MarkdownParser
from .pdf_parser import PDFParser
from .text_parser import TextParser
from .xml_parser import XMLParser


def default_parsers() -> List[BaseParser]:
    """Return one instance of every built-in parser."""
    return [HTMLParser(), XMLParser(), MarkdownParser(), PDFParser(), TextParser()]


def parser_for(path: Path, parsers: Sequence[BaseParser]) -> Optional[BaseParser]:
    """Return the first parser that accepts `path`, or None."""
    for parser in parsers:
        if parser.can_parse(path):
            return parser
    return None


__all__ = [
    "BaseParser",
    "ParsedDocument",
    "HTMLParser",
    "MarkdownParser",
    "PDFParser",
    "TextParser",
    "XMLParser",
    "default_parsers",
    "parser_for",
]
