#!/usr/bin/env python3
"""
Configuration Demo

Shows the 3-tier configuration precedence (defaults < config/settings.yaml
< explicit overrides), validation of bad values, and vehicles ordered from
plain dictionaries through the factory registry.

Run: python examples/configuration_demo.py
"""

from pattern_demos.config.loader import ConfigLoader
from pattern_demos.config.validation import ConfigValidator
from pattern_demos.demos import run_vehicle_orders
from pattern_demos.errors import InvalidArgumentError
from pattern_demos.logging.config import configure_logging

VEHICLE_ORDERS = [
    {"kind": "car", "model": "Toyota Corolla", "year": 2021},
    {"kind": "motorcycle", "brand": "Ducati", "engine_capacity": 937},
    {"kind": "truck", "load_capacity": 18, "fuel_type": "LNG"},
]


def main():
    configure_logging(level="WARNING")
    loader = ConfigLoader.create()

    print("=== Effective configuration ===")
    config = loader.load({"payment": {"large_payment_threshold": 250}})
    print(f"Large payment threshold: {config.payment.large_payment_threshold}")
    print(f"Threads in concurrency test: {config.threading.thread_count}")
    print(f"Timestamp format: {config.logger.timestamp_format}")

    print("\n=== Validating bad overrides ===")
    merged = loader.merge_config({"threading": {"thread_count": 1}, "logging": {"level": "LOUD"}})
    for error in ConfigValidator.validate_config(merged):
        print(f"  {error.field}: {error.message} (value: {error.value})")

    print("\n=== Orders from the factory registry ===")
    run_vehicle_orders(VEHICLE_ORDERS)

    try:
        run_vehicle_orders([{"kind": "spaceship"}])
    except InvalidArgumentError as e:
        print(f"Rejected order: {e}")


if __name__ == "__main__":
    main()
