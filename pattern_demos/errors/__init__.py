"""
Error classification for the pattern demonstrations.

Recoverable errors (bad arguments at a service call site) are caught
locally and turned into log entries; unrecoverable errors signal misuse
of a pattern's construction rules.
"""

from .base import PatternDemoError
from .invalid_argument import InvalidArgumentError
from .misuse import SingletonViolationError

__all__ = [
    "PatternDemoError",
    "InvalidArgumentError",
    "SingletonViolationError",
]
