#!/usr/bin/env python3
"""
Singleton Demo - Logger System

Shows that every caller, including five concurrent threads, shares one
Logger instance, and how services turn invalid arguments into ERROR
entries instead of exceptions.

Run: python examples/singleton_demo.py
"""

from pattern_demos.config.loader import ConfigLoader
from pattern_demos.demos import run_singleton_demo
from pattern_demos.logging.config import configure_logging


def main():
    config = ConfigLoader.create().load()
    configure_logging(level=config.logging.level, format_json=config.logging.format_json)
    run_singleton_demo(config=config)


if __name__ == "__main__":
    main()
