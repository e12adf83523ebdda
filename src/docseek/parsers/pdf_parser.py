"""PDF parser built on `pypdf`.

Every page is extracted; a single failing page fails the whole document so
partially readable files never enter the index. Each page's lines are
lowercased and pages are joined with spaces.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from pypdf import PdfReader
from pypdf.errors import PyPdfError

from docseek.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument

# pypdf reports malformed object graphs through plain Python errors as well
_PDF_ERRORS = (PyPdfError, ValueError, KeyError, TypeError, IndexError)


class PDFParser(BaseParser):
    """Parser for `.pdf` files."""

    extensions = frozenset({".pdf"})

    def parse(self, path: Path) -> ParsedDocument:
        try:
            reader = PdfReader(path)
            encrypted = reader.is_encrypted
        except _PDF_ERRORS as exc:
            raise ParsingError(f"could not load {path} as pdf: {exc}") from exc
        if encrypted:
            raise ParsingError(f"{path} is encrypted")

        try:
            page_list = list(reader.pages)
        except _PDF_ERRORS as exc:
            raise ParsingError(f"could not read the page tree of {path}: {exc}") from exc

        pages: List[str] = []
        for number, page in enumerate(page_list, start=1):
            try:
                text = page.extract_text() or ""
            except _PDF_ERRORS as exc:
                raise ParsingError(f"could not extract text from page {number} of {path}: {exc}") from exc
            pages.append(" ".join(line.lower() for line in text.split("\n")))

        return ParsedDocument(
            text=" ".join(pages),
            metadata={"source_path": str(path), "pages": len(pages)},
        )
