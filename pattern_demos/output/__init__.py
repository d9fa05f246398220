"""
Output sinks for demonstration text.
"""
from .base import OutputSink
from .console import ConsoleSink, MemorySink

__all__ = ["OutputSink", "ConsoleSink", "MemorySink"]
