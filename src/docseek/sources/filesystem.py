"""Directory-tree content source.

Walks a root breadth-first, hands every regular file to the first parser
that accepts its extension and keeps the files that parse. Oversized,
executable, unrecognised and unreadable files are dropped with a debug log
line; none of them stops the walk.
"""

from __future__ import annotations

import logging
import os
import stat
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from docseek.config import MIB
from docseek.exceptions import ParsingError
from docseek.parsers import BaseParser, default_parsers, parser_for
from docseek.sources.base import ContentSource

logger = logging.getLogger(__name__)


class FilesystemSource(ContentSource):
    """Content source backed by a local directory tree."""

    def __init__(
        self,
        root: Union[str, Path],
        *,
        parsers: Optional[Sequence[BaseParser]] = None,
        max_file_size: int = 64 * MIB,
        skip_executables: bool = True,
        max_workers: Optional[int] = None,
    ) -> None:
        self.root = Path(root)
        self.parsers = list(parsers) if parsers is not None else default_parsers()
        self.max_file_size = max_file_size
        self.skip_executables = skip_executables and os.name == "posix"
        self.max_workers = max_workers

    def iter_files(self) -> Iterator[Path]:
        """Yield regular files below the root, breadth-first, sorted per directory."""
        pending = deque([self.root])
        while pending:
            current = pending.popleft()
            if current.is_file():
                yield current
                continue
            try:
                entries = sorted(current.iterdir())
            except OSError as exc:
                logger.warning("Could not read directory %s: %s", current, exc)
                continue
            for entry in entries:
                if entry.is_symlink() and entry.is_dir():
                    continue
                if entry.is_dir() or entry.is_file():
                    pending.append(entry)

    def extract(self, path: Path) -> Optional[Tuple[str, str]]:
        """Return `(path, text)` for a parseable file, otherwise None."""
        parser = parser_for(path, self.parsers)
        if parser is None:
            logger.debug("Skipping %s: unsupported extension", path)
            return None
        try:
            info = path.stat()
        except OSError as exc:
            logger.debug("Skipping %s: %s", path, exc)
            return None
        if not stat.S_ISREG(info.st_mode):
            logger.debug("Skipping %s: not a regular file", path)
            return None
        if info.st_size > self.max_file_size:
            logger.debug("Skipping %s: %d bytes exceeds limit", path, info.st_size)
            return None
        if self.skip_executables and info.st_mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
            logger.debug("Skipping %s: executable", path)
            return None
        try:
            parsed = parser.parse(path)
        except (ParsingError, OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping %s: %s", path, exc)
            return None
        return str(path), parsed.text

    def fetch(self, limit: Optional[int] = None) -> List[Tuple[str, str]]:
        files = list(self.iter_files())
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            results = [pair for pair in executor.map(self.extract, files) if pair is not None]
        logger.info("Extracted %d of %d files under %s", len(results), len(files), self.root)
        if limit is not None:
            return results[: max(0, int(limit))]
        return results
