"""A thread-safe text progress bar."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

BAR_LENGTH = 50


class ProgressBar:
    """Counts completed steps out of ``total`` and draws the bar on each step."""

    def __init__(self, total: int, stream: TextIO | None = None) -> None:
        if total <= 0:
            raise ValueError(f"total must be positive, got {total}")
        self.total = total
        self.current = 0
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def percentage(self) -> float:
        return self.current / self.total * 100

    def increment(self) -> None:
        """Advance by one step and redraw."""
        with self._lock:
            self.current += 1
            self.render()

    def render(self) -> None:
        """Draw the bar on the current line; print a closing line once complete."""
        stream = self._stream if self._stream is not None else sys.stdout
        percentage = self.percentage
        filled = min(BAR_LENGTH, int(BAR_LENGTH * percentage / 100))
        bar = "█" * filled + " " * (BAR_LENGTH - filled)
        stream.write(f"\r[{bar}] {percentage:.2f}%")
        if self.current >= self.total:
            stream.write("\nDone!\n")
        stream.flush()


def simulate_progress(bar: ProgressBar, delay: float = 0.1) -> None:
    """Step the bar through its total, pausing ``delay`` seconds before each step."""
    for _ in range(bar.total):
        time.sleep(delay)
        bar.increment()