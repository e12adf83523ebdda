from pathlib import Path
from typing import Callable

import pytest
from pypdf import PdfWriter

from conftest import BROKEN_PAGE_TREES, text_pdf
from docseek.exceptions import ParsingError
from docseek.parsers import (
    HTMLParser,
    MarkdownParser,
    PDFParser,
    TextParser,
    XMLParser,
    default_parsers,
    parser_for,
)


def test_text_parser_reads_utf8(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("hello wörld", encoding="utf-8")
    doc = TextParser().parse(path)
    assert doc.text == "hello wörld"
    assert doc.metadata["source_path"] == str(path)


def test_text_parser_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ParsingError):
        TextParser().parse(path)


def test_html_parser_extracts_visible_text(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_text(
        "<html><head><style>p {color: red}</style><script>var x = 1;</script></head>"
        "<body><h1>Title</h1><p>Some <b>bold</b> text</p></body></html>",
        encoding="utf-8",
    )
    doc = HTMLParser().parse(path)
    assert doc.text == "Title Some bold text"


def test_markdown_parser_strips_markup() -> None:
    doc = MarkdownParser().parse_markdown_content("# Heading\n\nSome *emphasis* and `code`.")
    assert "Heading" in doc.text
    assert "emphasis" in doc.text
    assert "*" not in doc.text and "#" not in doc.text


def test_xml_parser_collects_character_data(tmp_path: Path) -> None:
    path = tmp_path / "data.xml"
    path.write_text("<root><a>alpha </a><b>beta<c> gamma</c></b></root>", encoding="utf-8")
    assert XMLParser().parse(path).text == "alpha beta gamma"


def test_xml_parser_reports_malformed_documents(tmp_path: Path) -> None:
    path = tmp_path / "broken.xml"
    path.write_text("<root><a></root>", encoding="utf-8")
    with pytest.raises(ParsingError):
        XMLParser().parse(path)


def test_xml_parser_keeps_nothing_from_truncated_documents(tmp_path: Path) -> None:
    path = tmp_path / "truncated.xml"
    path.write_text("<root><a>readable prefix</a><b>cut off", encoding="utf-8")
    with pytest.raises(ParsingError):
        XMLParser().parse(path)


def test_pdf_parser_reports_garbage(tmp_path: Path) -> None:
    path = tmp_path / "fake.pdf"
    path.write_bytes(b"this is not a pdf")
    with pytest.raises(ParsingError):
        PDFParser().parse(path)


def test_pdf_parser_extracts_lowercased_page_text(write_pdf: Callable[[str, bytes], Path]) -> None:
    path = write_pdf("two-pages.pdf", text_pdf("Hello World", "Second PAGE"))
    doc = PDFParser().parse(path)
    assert doc.metadata["pages"] == 2
    assert "hello world" in doc.text
    assert "second page" in doc.text
    assert doc.text == doc.text.lower()
    assert doc.text.index("hello world") < doc.text.index("second page")


@pytest.mark.parametrize("name", sorted(BROKEN_PAGE_TREES))
def test_pdf_parser_reports_broken_page_tree(name: str, write_pdf: Callable[[str, bytes], Path]) -> None:
    path = write_pdf(f"{name}.pdf", BROKEN_PAGE_TREES[name])
    with pytest.raises(ParsingError):
        PDFParser().parse(path)


def test_pdf_parser_rejects_encrypted_documents(tmp_path: Path) -> None:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    writer.encrypt("secret")
    path = tmp_path / "locked.pdf"
    with path.open("wb") as fh:
        writer.write(fh)
    with pytest.raises(ParsingError, match="encrypted"):
        PDFParser().parse(path)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("index.HTML", HTMLParser),
        ("feed.xml", XMLParser),
        ("page.xhtml", XMLParser),
        ("README.md", MarkdownParser),
        ("paper.pdf", PDFParser),
        ("main.rs", TextParser),
        ("script.py", TextParser),
        ("notes.txt", TextParser),
    ],
)
def test_parser_for_dispatches_on_extension(name: str, expected: type) -> None:
    assert isinstance(parser_for(Path(name), default_parsers()), expected)


@pytest.mark.parametrize("name", ["image.png", "archive.zip", "Makefile", "binary"])
def test_parser_for_unknown_extension(name: str) -> None:
    assert parser_for(Path(name), default_parsers()) is None


def test_text_parser_recognises_many_extensions() -> None:
    assert len(TextParser.extensions) >= 60
