"""Command-line entrypoint.

    docseek <directory> [query ...]

Indexes every supported file below <directory>. With query words the best
matches are printed and the program exits; otherwise the server starts.
"""

from __future__ import annotations

import argparse
import logging
import threading
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from docseek.config import Settings, load_settings
from docseek.logging_config import configure_logging
from docseek.search.builder import build_index
from docseek.search.index import CorpusIndex
from docseek.search.progress import ProgressView, QueueProgress
from docseek.search.ranker import search
from docseek.sources.filesystem import FilesystemSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docseek",
        description="Index a directory tree and search it by TF-IDF relevance.",
    )
    parser.add_argument("directory", type=Path, help="directory to index")
    parser.add_argument("query", nargs="*", help="search once and print the results instead of serving")
    parser.add_argument("--host", help="address to serve on (overrides DOCSEEK_APP__HOST)")
    parser.add_argument("--port", type=int, help="port to serve on (overrides DOCSEEK_APP__PORT)")
    return parser


def index_directory(root: Path, settings: Settings, *, console: Optional[Console] = None) -> CorpusIndex:
    """Extract and index `root`, drawing build progress on `console`."""
    cfg = settings.index
    source = FilesystemSource(
        root,
        max_file_size=cfg.max_file_size,
        skip_executables=cfg.skip_executables,
        max_workers=cfg.max_workers,
    )
    contents = source.fetch()

    channel = QueueProgress()
    view = ProgressView(channel, f"indexing {len(contents)} files under {root}", console=console)
    drawer = threading.Thread(target=view.run, name="docseek-progress", daemon=True)
    drawer.start()
    index = build_index(
        contents,
        progress=channel,
        parallel_threshold=cfg.parallel_threshold,
        max_workers=cfg.max_workers,
        mode=cfg.mode,
    )
    drawer.join()
    return index


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    console = Console(stderr=True)
    configure_logging(settings.app.log_level, console=console)

    root: Path = args.directory
    if not root.exists():
        logger.error("%s does not exist", root)
        return 1

    index = index_directory(root, settings, console=console)

    if args.query:
        query = " ".join(args.query)
        for path, score in search(index, query, limit=settings.search.result_limit):
            if score != 0.0:
                print(f"{path} => {score}")
        return 0

    if args.host:
        settings.app.host = args.host
    if args.port:
        settings.app.port = args.port

    # Imported lazily so one-shot queries do not pay for the server stack
    from docseek.mcp.server import AppState, serve

    serve(AppState(settings, index))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
