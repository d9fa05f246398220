#!/usr/bin/env python3
"""
Factory Method Demo

Orders a car, a motorcycle and a truck through their factories. Each
order shows the vehicle's details before driving it.

Run: python examples/factory_method_demo.py
"""

from pattern_demos.demos import run_factory_demo
from pattern_demos.logging.config import configure_logging


def main():
    configure_logging(level="WARNING")
    vehicles = run_factory_demo()
    print(f"Delivered {len(vehicles)} vehicles.")


if __name__ == "__main__":
    main()
