"""Tests for the demonstration entry points."""

from dataclasses import replace

import pytest

from pattern_demos.config.defaults import ThreadingParams, get_default_config
from pattern_demos.demos import (
    run_factory_demo,
    run_observer_demo,
    run_singleton_demo,
    run_vehicle_orders,
)
from pattern_demos.errors import InvalidArgumentError
from pattern_demos.factory import Car, Motorcycle, Truck
from pattern_demos.observer import StatisticsDisplay
from pattern_demos.singleton import Logger
from pattern_demos.singleton.logger import NO_ENTRIES


class TestFactoryDemo:

    def test_orders_three_vehicles(self, sink) -> None:
        vehicles = run_factory_demo(sink)

        assert vehicles == [Car("Tesla Model 3", 2023), Motorcycle("Harley Davidson", 1450),
                            Truck(10, "Diesel")]
        assert sink.lines.count("Vehicle delivered!") == 3

    def test_vehicle_orders_from_dicts(self, sink) -> None:
        vehicles = run_vehicle_orders([
            {"kind": "car", "model": "Civic", "year": 2020},
            {"kind": "truck", "load_capacity": 5, "fuel_type": "Electric"},
        ], sink)
        assert vehicles == [Car("Civic", 2020), Truck(5, "Electric")]

    def test_vehicle_order_without_kind(self, sink) -> None:
        with pytest.raises(InvalidArgumentError):
            run_vehicle_orders([{"model": "Civic", "year": 2020}], sink)


class TestSingletonDemo:

    def test_singleton_demo(self, sink) -> None:
        config = replace(get_default_config(),
                         threading=ThreadingParams(thread_count=5, hold_seconds=0))

        logger = run_singleton_demo(sink, config)

        assert logger is Logger.get_instance()
        assert Logger.instance_count() == 1
        assert "Are both loggers the same instance? True" in sink.lines
        assert "Threading test complete. Instance count: 1" in sink.lines
        # Only the shutdown entry survives the clear
        assert [e.message for e in logger.entries] == ["Application shutting down"]

    def test_first_display_lists_service_entries(self, sink) -> None:
        config = replace(get_default_config(),
                         threading=ThreadingParams(thread_count=2, hold_seconds=0))

        run_singleton_demo(sink, config)

        text = sink.text
        assert "[ERROR] Failed to register user: Username cannot be empty" in text
        assert "[ERROR] Payment processing failed: Payment amount must be positive" in text
        assert "[WARNING] Large payment of $5000 detected for user 'big_spender'." in text
        assert NO_ENTRIES not in text
        assert sink.lines.count("----- LOG ENTRIES -----") == 2


class TestObserverDemo:

    def test_observer_demo(self, sink) -> None:
        station = run_observer_demo(sink)

        # CurrentConditionsDisplay was removed before the last reading
        assert len(station.observers) == 2
        statistics = station.observers[0]
        assert isinstance(statistics, StatisticsDisplay)
        assert statistics.temperature_history == [25.2, 28.5, 22.1, 24.5]

        assert "--- Displaying Information After Removal ---" in sink.lines
        after_removal = sink.lines[sink.lines.index("--- Displaying Information After Removal ---"):]
        assert not any(line.startswith("[CurrentConditions]") for line in after_removal)
        assert "[Forecast] Forecast: Improving weather on the way!" in after_removal

    def test_forecast_sequence(self, sink) -> None:
        run_observer_demo(sink)
        forecasts = [line for line in sink.lines if line.startswith("[Forecast]")]
        assert forecasts == [
            "[Forecast] Forecast: Improving weather on the way!",
            "[Forecast] Forecast: Cooler, rainy weather coming.",
            "[Forecast] Forecast: Cooler, rainy weather coming.",
            "[Forecast] Forecast: Improving weather on the way!",
        ]
