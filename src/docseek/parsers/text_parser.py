"""Plain-text parser for prose, configuration and source files."""

from __future__ import annotations

from pathlib import Path

from docseek.exceptions import ParsingError

from .base_parser import BaseParser, ParsedDocument

TEXT_EXTENSIONS = frozenset(
    {
        # prose and markup read verbatim
        ".txt", ".text", ".rst", ".adoc", ".org", ".tex", ".csv", ".tsv", ".log",
        # configuration
        ".json", ".yaml", ".yml", ".toml", ".ini", ".cfg", ".conf", ".env", ".properties",
        # source code
        ".py", ".pyi", ".rs", ".c", ".h", ".cc", ".cpp", ".cxx", ".hpp", ".hh",
        ".java", ".kt", ".kts", ".scala", ".go", ".js", ".mjs", ".cjs", ".ts", ".tsx",
        ".jsx", ".rb", ".php", ".pl", ".pm", ".lua", ".swift", ".m", ".mm", ".cs",
        ".fs", ".hs", ".ml", ".mli", ".ex", ".exs", ".erl", ".clj", ".dart", ".zig",
        ".nim", ".jl", ".r", ".sql", ".sh", ".bash", ".zsh", ".fish", ".ps1", ".bat",
        ".vim", ".el", ".lisp", ".scm", ".css", ".scss", ".less", ".glsl", ".vert",
        ".frag", ".cmake", ".mk", ".gradle", ".proto",
    }
)


class TextParser(BaseParser):
    """Parser for UTF-8 text files with a recognised extension."""

    extensions = TEXT_EXTENSIONS

    def parse(self, path: Path) -> ParsedDocument:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ParsingError(f"{path} is not valid UTF-8") from exc
        return ParsedDocument(text=text, metadata={"source_path": str(path)})
