"""Progress reporting for index builds.

The builder only knows about `ProgressSink.post`. `QueueProgress` turns that
into a non-blocking channel, and `ProgressView` is the polling consumer that
draws the latest milestone on a terminal. Values 5..100 are percentages;
0 means the build has finished.
"""

from __future__ import annotations

import queue
from typing import Optional, Protocol

from rich.console import Console

DONE = 0


class ProgressSink(Protocol):
    """Anything that accepts progress updates."""

    def post(self, value: int) -> None: ...


class NullProgress:
    """Sink that ignores every update."""

    def post(self, value: int) -> None:
        return None


class QueueProgress:
    """Unbounded single-producer channel; `post` never blocks."""

    def __init__(self) -> None:
        self._queue: "queue.SimpleQueue[int]" = queue.SimpleQueue()

    def post(self, value: int) -> None:
        self._queue.put_nowait(value)

    def poll(self, timeout: Optional[float] = None) -> Optional[int]:
        """Return the next value, or None if nothing arrived within `timeout`."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None


class ProgressView:
    """Redraws a status line with the latest percentage until `DONE` arrives."""

    def __init__(
        self,
        channel: QueueProgress,
        message: str,
        *,
        console: Optional[Console] = None,
        interval: float = 0.5,
    ) -> None:
        self.channel = channel
        self.message = message
        self.console = console or Console(stderr=True)
        self.interval = interval
        self.percentage: Optional[int] = None

    def render(self) -> str:
        if self.percentage is None:
            return self.message
        return f"{self.message} {self.percentage}%.."

    def run(self) -> None:
        with self.console.status(self.render()) as status:
            while True:
                value = self.channel.poll(timeout=self.interval)
                if value is None:
                    continue
                if value == DONE:
                    return
                self.percentage = value
                status.update(self.render())
