"""
Configuration management for the pattern demonstrations.
"""
from .defaults import DemoConfig, get_default_config
from .loader import ConfigLoader

__all__ = ["DemoConfig", "ConfigLoader", "get_default_config"]
