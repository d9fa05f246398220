"""Tests for vehicle products."""

import dataclasses

import pytest

from pattern_demos.factory.vehicles import Car, Motorcycle, Truck, Vehicle


class TestVehicleProducts:
    """Test suite for the concrete vehicles."""

    def test_car_lines(self) -> None:
        car = Car("Tesla Model 3", 2023)
        assert car.display_info() == "Car: Tesla Model 3, Year: 2023"
        assert car.drive() == "Driving Tesla Model 3 car on the road"

    def test_motorcycle_lines(self) -> None:
        motorcycle = Motorcycle("Harley Davidson", 1450)
        assert motorcycle.display_info() == "Motorcycle: Harley Davidson, Engine: 1450cc"
        assert motorcycle.drive() == "Riding Harley Davidson motorcycle with 1450cc engine"

    def test_truck_lines(self) -> None:
        truck = Truck(10, "Diesel")
        assert truck.display_info() == "Truck: Load Capacity = 10 tons, Fuel Type = Diesel"
        assert truck.drive() == "Driving a truck with 10 tons load capacity using Diesel fuel."

    def test_vehicles_are_immutable(self) -> None:
        car = Car("Civic", 2020)
        with pytest.raises(dataclasses.FrozenInstanceError):
            car.year = 2021  # type: ignore[misc]

    def test_vehicle_interface_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Vehicle()  # type: ignore[abstract]

    def test_negative_load_capacity_is_accepted(self) -> None:
        """Inputs are not validated."""
        truck = Truck(-5, "Diesel")
        assert "-5 tons" in truck.display_info()
