"""Index construction from extracted `(path, content)` pairs.

Small corpora are ingested sequentially. When the first half of the input
contains a very large file the build fans out over a thread pool: every
worker tokenizes its document without holding any lock and only the commit
into the shared index (plus the progress count) is serialized.

Progress milestones are document counts for 5%, 10%, ..., 100% of the input,
computed up front; each fires once, when the processed count reaches it.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Literal, Optional, Sequence, Tuple

from docseek.config import GIB
from docseek.search.document import Document
from docseek.search.index import CorpusIndex
from docseek.search.progress import DONE, NullProgress, ProgressSink

logger = logging.getLogger(__name__)

Contents = Sequence[Tuple[str, str]]
Mode = Literal["auto", "sequential", "parallel"]

MILESTONE_STEP = 5


def milestones(total_docs: int) -> Dict[int, List[int]]:
    """Map processed-document counts to the percentages they complete."""
    table: Dict[int, List[int]] = {}
    for percentage in range(MILESTONE_STEP, 101, MILESTONE_STEP):
        count = total_docs * percentage // 100
        table.setdefault(count, []).append(percentage)
    return table


def choose_mode(contents: Contents, parallel_threshold: int = GIB) -> Literal["sequential", "parallel"]:
    """Pick parallel ingestion if any content in the first half is huge."""
    prefix = contents[: len(contents) // 2]
    if any(len(content) >= parallel_threshold for _, content in prefix):
        return "parallel"
    return "sequential"


class IndexBuilder:
    """Populates a `CorpusIndex` and reports progress to a sink."""

    def __init__(
        self,
        index: CorpusIndex,
        *,
        progress: Optional[ProgressSink] = None,
        parallel_threshold: int = GIB,
        max_workers: Optional[int] = None,
        mode: Mode = "auto",
    ) -> None:
        self.index = index
        self.progress: ProgressSink = progress or NullProgress()
        self.parallel_threshold = parallel_threshold
        self.max_workers = max_workers
        self.mode = mode
        self._processed = 0
        self._milestones: Dict[int, List[int]] = {}

    @property
    def processed(self) -> int:
        return self._processed

    def build(self, contents: Contents) -> CorpusIndex:
        """Ingest all `contents`, then post `DONE`."""
        contents = list(contents)
        self._processed = 0
        self._milestones = milestones(len(contents))

        mode = self.mode if self.mode != "auto" else choose_mode(contents, self.parallel_threshold)
        logger.info("Indexing %d documents (%s)", len(contents), mode)
        try:
            if mode == "parallel":
                self._build_parallel(contents)
            else:
                self._build_sequential(contents)
        finally:
            self.progress.post(DONE)
        logger.info(
            "Indexed %d documents, %d distinct terms",
            self.index.size(),
            len(self.index.document_frequency),
        )
        return self.index

    def _build_sequential(self, contents: Contents) -> None:
        for path, content in contents:
            self.index.add_or_replace(path, content)
            self._advance()

    def _build_parallel(self, contents: Contents) -> None:
        def ingest(pair: Tuple[str, str]) -> None:
            path, content = pair
            document = Document.build(content, normalizer=self.index.normalizer)
            self.index.add_document(path, document, on_commit=self._advance)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            # Consuming the iterator re-raises the first worker failure
            for _ in executor.map(ingest, contents):
                pass

    def _advance(self) -> None:
        # Runs under the index lock in parallel mode
        self._processed += 1
        for percentage in self._milestones.get(self._processed, ()):
            self.progress.post(percentage)


def build_index(
    contents: Contents,
    *,
    index: Optional[CorpusIndex] = None,
    progress: Optional[ProgressSink] = None,
    parallel_threshold: int = GIB,
    max_workers: Optional[int] = None,
    mode: Mode = "auto",
) -> CorpusIndex:
    """Build (or extend) an index from `contents`; see `IndexBuilder`."""
    target = index if index is not None else CorpusIndex(expected_documents=len(contents))
    builder = IndexBuilder(
        target,
        progress=progress,
        parallel_threshold=parallel_threshold,
        max_workers=max_workers,
        mode=mode,
    )
    return builder.build(contents)
