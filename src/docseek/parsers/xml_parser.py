"""XML parser collecting the character data of every element."""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree

from docseek.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument


class XMLParser(BaseParser):
    """Parser for `.xml` and `.xhtml` files."""

    extensions = frozenset({".xml", ".xhtml"})

    def parse(self, path: Path) -> ParsedDocument:
        try:
            tree = ElementTree.parse(path)
        except ElementTree.ParseError as exc:
            raise ParsingError(f"could not parse {path} as xml: {exc}") from exc
        # Text nodes are concatenated without separators, tails included
        text = "".join(tree.getroot().itertext())
        return ParsedDocument(text=text, metadata={"source_path": str(path)})
