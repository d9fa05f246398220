"""
Logging configuration and utilities for the pattern demonstrations.
"""
from .config import configure_logging, get_logger, get_pattern_logger

__all__ = ["configure_logging", "get_logger", "get_pattern_logger"]
