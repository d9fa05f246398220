"""
Entry points reproducing the three console demonstrations.

Each function writes its narrative to an OutputSink and returns the
objects it built, so the same runs can be inspected from tests.
"""

from decimal import Decimal
from typing import Any, Optional

from .config.defaults import DemoConfig, get_default_config
from .factory import CarFactory, MotorcycleFactory, TruckFactory, Vehicle, create_factory
from .observer import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    StatisticsDisplay,
    WeatherStation,
)
from .output import ConsoleSink, OutputSink
from .singleton import Logger, PaymentService, UserService, run_threading_test

OBSERVER_READINGS = [
    (25.2, 65.3, 1013.1),
    (28.5, 70.2, 1012.5),
    (22.1, 90.7, 1009.2),
]
READING_AFTER_REMOVAL = (24.5, 80.1, 1010.3)


def run_factory_demo(sink: Optional[OutputSink] = None) -> list[Vehicle]:
    """Order one car, one motorcycle and one truck."""
    sink = sink or ConsoleSink()
    sink.emit("Factory Method Pattern Demonstration")
    sink.emit()

    factories = [
        CarFactory("Tesla Model 3", 2023),
        MotorcycleFactory("Harley Davidson", 1450),
        TruckFactory(10, "Diesel"),
    ]
    return [factory.order_vehicle(sink) for factory in factories]


def run_vehicle_orders(orders: list[dict[str, Any]],
                       sink: Optional[OutputSink] = None) -> list[Vehicle]:
    """
    Order vehicles described as plain dictionaries.

    Args:
        orders: Items like ``{"kind": "car", "model": "...", "year": 2023}``
        sink: Destination for the order lines, stdout when omitted

    Returns:
        The delivered vehicles, in order
    """
    sink = sink or ConsoleSink()
    vehicles = []
    for order in orders:
        params = dict(order)
        kind = params.pop("kind", None)
        vehicles.append(create_factory(kind, **params).order_vehicle(sink))
    return vehicles


def run_singleton_demo(sink: Optional[OutputSink] = None,
                       config: Optional[DemoConfig] = None) -> Logger:
    """Exercise the shared Logger from services and concurrent threads."""
    sink = sink or ConsoleSink()
    config = config or get_default_config()
    sink.emit("Singleton Pattern Demonstration - Logger System")
    sink.emit()

    logger1 = Logger.get_instance()
    logger2 = Logger.get_instance()
    logger1.configure(timestamp_format=config.logger.timestamp_format)

    sink.emit(f"Are both loggers the same instance? {logger1 is logger2}")
    sink.emit(f"Total instances created: {Logger.instance_count()} (should be 1)")
    sink.emit()

    run_threading_test(config.threading.thread_count, config.threading.hold_seconds, sink)

    user_service = UserService(logger1)
    payment_service = PaymentService(logger1, config.payment)

    user_service.register_user("john_doe")
    payment_service.process_payment("john_doe", Decimal("99.99"))

    user_service.register_user("")
    payment_service.process_payment("jane_doe", -50)

    payment_service.process_payment("big_spender", Decimal("5000"))

    logger1.display_logs(sink)
    logger1.clear_logs()
    sink.emit("All logs have been cleared.")

    logger1.log_info("Application shutting down")
    logger1.display_logs(sink)
    return logger1


def run_observer_demo(sink: Optional[OutputSink] = None) -> WeatherStation:
    """Feed readings to three displays, then drop one of them."""
    sink = sink or ConsoleSink()
    sink.emit("Observer Pattern Demonstration - Weather Station")
    sink.emit()

    station = WeatherStation()
    sink.emit("Creating display devices...")
    current = CurrentConditionsDisplay(station)
    statistics = StatisticsDisplay(station)
    forecast = ForecastDisplay(station)

    headings = ["Displaying Information", "Displaying Updated Information",
                "Displaying Final Information"]
    for heading, reading in zip(headings, OBSERVER_READINGS):
        _publish(station, reading, sink)
        sink.emit(f"--- {heading} ---")
        sink.emit_lines([current.display(), statistics.display(), forecast.display()])

    sink.emit()
    sink.emit("Removing CurrentConditionsDisplay...")
    station.remove_observer(current)

    _publish(station, READING_AFTER_REMOVAL, sink)
    sink.emit("--- Displaying Information After Removal ---")
    sink.emit_lines([statistics.display(), forecast.display()])

    sink.emit()
    sink.emit("Observer Pattern demonstration complete.")
    return station


def _publish(station: WeatherStation, reading: tuple[float, float, float],
             sink: OutputSink) -> None:
    sink.emit()
    sink.emit("--- Weather Station: Weather measurements updated ---")
    station.set_measurements(*reading)
    sink.emit_lines(station.reading_lines())
