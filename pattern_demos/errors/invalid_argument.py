"""
Invalid argument errors raised by service call sites.

These are always recoverable: the raising service catches them and
records an ERROR entry instead of letting them reach its caller.
"""

from typing import Any, Optional

from .base import PatternDemoError


class InvalidArgumentError(PatternDemoError):
    """An argument failed local validation."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, recoverable=True, **kwargs)
        self.argument = argument
        self.value = value
