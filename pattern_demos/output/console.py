"""Standard output and in-memory sinks."""

import sys
from typing import Optional, TextIO

from .base import OutputSink


class ConsoleSink(OutputSink):
    """Prints each line to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        super().__init__("console")
        self.stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout, flush=True)


class MemorySink(OutputSink):
    """Collects lines in memory, mainly for tests."""

    def __init__(self):
        super().__init__("memory")
        self.lines: list[str] = []

    def _write(self, line: str) -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
