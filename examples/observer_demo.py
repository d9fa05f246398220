#!/usr/bin/env python3
"""
Observer Demo - Weather Station

Three displays subscribe to a weather station and update on every new
reading. The current conditions display is removed before the last one.

Run: python examples/observer_demo.py
"""

from pattern_demos.demos import run_observer_demo
from pattern_demos.logging.config import configure_logging


def main():
    configure_logging(level="WARNING")
    run_observer_demo()


if __name__ == "__main__":
    main()
