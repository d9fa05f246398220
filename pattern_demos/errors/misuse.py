"""Errors signalling that a pattern's construction rules were bypassed."""

from typing import Optional

from .base import PatternDemoError


class SingletonViolationError(PatternDemoError):
    """A singleton type was constructed outside its instance accessor."""

    def __init__(self, message: str, class_name: Optional[str] = None, **kwargs):
        super().__init__(message, recoverable=False, **kwargs)
        self.class_name = class_name
