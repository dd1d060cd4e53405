"""Bounded in-memory log buffer shown in the logs panel."""

import logging
from collections import deque
from contextlib import contextmanager
from typing import Iterator, List

DEFAULT_CAPACITY = 100
PACKAGE_LOGGER = "nbody_tui"


class LogBuffer(logging.Handler):
    """Logging handler keeping the most recent formatted messages.

    Oldest entries are evicted first once capacity is reached.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY, level: int = logging.DEBUG):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        super().__init__(level)
        self.capacity = capacity
        self._lines = deque(maxlen=capacity)

    def emit(self, record: logging.LogRecord):
        try:
            self._lines.append(self.format(record))
        except Exception:
            self.handleError(record)

    def __len__(self) -> int:
        return len(self._lines)

    def records(self) -> List[str]:
        return list(self._lines)

    def tail(self, n: int = 10) -> str:
        """Return the last min(n, len) lines, each newline-terminated."""
        if n <= 0:
            return ""
        lines = list(self._lines)[-n:]
        return "".join(f"{line}\n" for line in lines)


@contextmanager
def capture_logs(buffer: LogBuffer, logger_name: str = PACKAGE_LOGGER) -> Iterator[logging.Logger]:
    """Route DEBUG and above from a logger hierarchy into ``buffer``.

    Propagation to the root logger is switched off while capturing so
    records do not reach stream handlers writing over the terminal UI.
    The logger's level and propagation flag are restored on exit.
    """
    target = logging.getLogger(logger_name)
    previous_level = target.level
    previous_propagate = target.propagate
    target.setLevel(logging.DEBUG)
    target.propagate = False
    target.addHandler(buffer)
    try:
        yield target
    finally:
        target.removeHandler(buffer)
        target.setLevel(previous_level)
        target.propagate = previous_propagate
