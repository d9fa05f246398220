"""Vehicle products created by the factories."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Vehicle(ABC):
    """Capability set shared by every vehicle product."""

    @abstractmethod
    def drive(self) -> str:
        """Describe the vehicle being driven."""

    @abstractmethod
    def display_info(self) -> str:
        """Describe the vehicle's construction parameters."""


@dataclass(frozen=True)
class Car(Vehicle):
    model: str
    year: int

    def drive(self) -> str:
        return f"Driving {self.model} car on the road"

    def display_info(self) -> str:
        return f"Car: {self.model}, Year: {self.year}"


@dataclass(frozen=True)
class Motorcycle(Vehicle):
    brand: str
    engine_capacity: int               # cc

    def drive(self) -> str:
        return f"Riding {self.brand} motorcycle with {self.engine_capacity}cc engine"

    def display_info(self) -> str:
        return f"Motorcycle: {self.brand}, Engine: {self.engine_capacity}cc"


@dataclass(frozen=True)
class Truck(Vehicle):
    load_capacity: int                 # tons
    fuel_type: str

    def drive(self) -> str:
        return (
            f"Driving a truck with {self.load_capacity} tons load capacity "
            f"using {self.fuel_type} fuel."
        )

    def display_info(self) -> str:
        return f"Truck: Load Capacity = {self.load_capacity} tons, Fuel Type = {self.fuel_type}"
