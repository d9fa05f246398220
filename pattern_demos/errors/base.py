"""Base error type shared by every demonstration."""

from typing import Optional, Dict, Any


class PatternDemoError(Exception):
    """Base class for errors raised by the pattern demonstrations."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None,
                 recoverable: bool = True):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable
