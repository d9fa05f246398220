"""Base class for demonstration output sinks."""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class OutputSink(ABC):
    """Destination for the human-readable lines a demonstration produces."""

    def __init__(self, name: str):
        self.name = name
        self._emitted_count = 0

    @abstractmethod
    def _write(self, line: str) -> None:
        """Write a single line to the destination."""

    def emit(self, line: str = "") -> None:
        """Emit one line of output."""
        self._write(line)
        self._emitted_count += 1

    def emit_lines(self, lines: Iterable[str]) -> None:
        """Emit several lines in order."""
        for line in lines:
            self.emit(line)

    @property
    def emitted_count(self) -> int:
        return self._emitted_count
