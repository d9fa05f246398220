"""
Factory Method demonstration: vehicle products and their creators.
"""
from .creators import (
    CarFactory,
    MotorcycleFactory,
    TruckFactory,
    VehicleFactory,
    create_factory,
)
from .vehicles import Car, Motorcycle, Truck, Vehicle

__all__ = [
    "Vehicle",
    "Car",
    "Motorcycle",
    "Truck",
    "VehicleFactory",
    "CarFactory",
    "MotorcycleFactory",
    "TruckFactory",
    "create_factory",
]
