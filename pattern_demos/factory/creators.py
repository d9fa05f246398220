"""Vehicle factories implementing the Factory Method pattern."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..errors import InvalidArgumentError
from ..logging.config import get_pattern_logger
from ..output import ConsoleSink, OutputSink
from .vehicles import Car, Motorcycle, Truck, Vehicle

ORDER_STARTED = "Ordering a new vehicle..."
ORDER_DELIVERED = "Vehicle delivered!"


class VehicleFactory(ABC):
    """Abstract creator whose subclasses decide which vehicle to build."""

    def __init__(self):
        self.logger = get_pattern_logger(__name__, "factory_method",
                                         factory=type(self).__name__)

    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """
        Build a new vehicle from the parameters bound at construction.

        Returns:
            A fresh vehicle instance on every call
        """

    def order_vehicle(self, sink: Optional[OutputSink] = None) -> Vehicle:
        """
        Create a vehicle and walk it through the ordering steps.

        The vehicle's info is always shown before it is driven.

        Args:
            sink: Destination for the order lines, stdout when omitted

        Returns:
            The vehicle that was created and delivered
        """
        sink = sink or ConsoleSink()
        vehicle = self.create_vehicle()
        self.logger.debug("Vehicle created", vehicle=type(vehicle).__name__)

        sink.emit(ORDER_STARTED)
        sink.emit(vehicle.display_info())
        sink.emit(vehicle.drive())
        sink.emit(ORDER_DELIVERED)
        sink.emit()

        self.logger.info("Vehicle delivered", vehicle=type(vehicle).__name__)
        return vehicle


class CarFactory(VehicleFactory):

    def __init__(self, model: str, year: int):
        super().__init__()
        self._model = model
        self._year = year

    def create_vehicle(self) -> Vehicle:
        return Car(self._model, self._year)


class MotorcycleFactory(VehicleFactory):

    def __init__(self, brand: str, engine_capacity: int):
        super().__init__()
        self._brand = brand
        self._engine_capacity = engine_capacity

    def create_vehicle(self) -> Vehicle:
        return Motorcycle(self._brand, self._engine_capacity)


class TruckFactory(VehicleFactory):

    def __init__(self, load_capacity: int, fuel_type: str):
        super().__init__()
        self._load_capacity = load_capacity
        self._fuel_type = fuel_type

    def create_vehicle(self) -> Vehicle:
        return Truck(self._load_capacity, self._fuel_type)


FACTORY_REGISTRY: dict[str, type[VehicleFactory]] = {
    "car": CarFactory,
    "motorcycle": MotorcycleFactory,
    "truck": TruckFactory,
}


def create_factory(kind: str, **params: Any) -> VehicleFactory:
    """
    Build a concrete factory by name.

    Args:
        kind: One of "car", "motorcycle" or "truck" (case-insensitive)
        **params: Constructor arguments for the chosen factory

    Returns:
        Configured factory instance

    Raises:
        InvalidArgumentError: If kind is unknown or params do not match
    """
    factory_type = FACTORY_REGISTRY.get(str(kind).lower())
    if factory_type is None:
        raise InvalidArgumentError(
            f"Unknown vehicle kind: {kind}",
            argument="kind",
            value=kind,
            context={"known_kinds": sorted(FACTORY_REGISTRY)},
        )

    try:
        return factory_type(**params)
    except TypeError as e:
        raise InvalidArgumentError(
            f"Invalid parameters for {kind} factory: {e}",
            argument="params",
            value=params,
        ) from e
