"""Tests for the vehicle factories and the order template."""

import pytest

from pattern_demos.errors import InvalidArgumentError
from pattern_demos.factory import (
    Car,
    CarFactory,
    Motorcycle,
    MotorcycleFactory,
    Truck,
    TruckFactory,
    VehicleFactory,
    create_factory,
)
from pattern_demos.factory.creators import ORDER_DELIVERED, ORDER_STARTED


class TestCreateVehicle:
    """Test suite for create_vehicle on each factory."""

    @pytest.mark.parametrize("factory, expected_type, expected_info", [
        (CarFactory("Tesla Model 3", 2023), Car, "Car: Tesla Model 3, Year: 2023"),
        (MotorcycleFactory("Harley Davidson", 1450), Motorcycle,
         "Motorcycle: Harley Davidson, Engine: 1450cc"),
        (TruckFactory(10, "Diesel"), Truck,
         "Truck: Load Capacity = 10 tons, Fuel Type = Diesel"),
    ])
    def test_factory_builds_its_product(self, factory, expected_type, expected_info) -> None:
        vehicle = factory.create_vehicle()
        assert vehicle is not None
        assert isinstance(vehicle, expected_type)
        assert vehicle.display_info() == expected_info

    def test_each_call_returns_new_instance(self) -> None:
        factory = MotorcycleFactory("Ducati", 937)
        first = factory.create_vehicle()
        second = factory.create_vehicle()
        assert first is not second
        assert first == second

    def test_abstract_creator_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            VehicleFactory()  # type: ignore[abstract]


class TestOrderVehicle:
    """Test suite for the order_vehicle template operation."""

    def test_order_lines_in_contract_order(self, sink) -> None:
        vehicle = CarFactory("Tesla Model 3", 2023).order_vehicle(sink)

        assert isinstance(vehicle, Car)
        assert sink.lines == [
            ORDER_STARTED,
            "Car: Tesla Model 3, Year: 2023",
            "Driving Tesla Model 3 car on the road",
            ORDER_DELIVERED,
            "",
        ]

    def test_info_shown_before_drive(self, sink) -> None:
        TruckFactory(10, "Diesel").order_vehicle(sink)
        info_index = sink.lines.index("Truck: Load Capacity = 10 tons, Fuel Type = Diesel")
        drive_index = sink.lines.index(
            "Driving a truck with 10 tons load capacity using Diesel fuel.")
        assert info_index < drive_index

    def test_custom_factory_uses_template(self, sink) -> None:
        """A new subclass only supplies the factory method."""

        class RentalCarFactory(VehicleFactory):
            def create_vehicle(self):
                return Car("Rental Hatchback", 2019)

        vehicle = RentalCarFactory().order_vehicle(sink)
        assert vehicle.model == "Rental Hatchback"
        assert sink.lines[1] == "Car: Rental Hatchback, Year: 2019"

    def test_order_defaults_to_stdout(self, capsys) -> None:
        MotorcycleFactory("Harley Davidson", 1450).order_vehicle()
        out = capsys.readouterr().out
        assert "Ordering a new vehicle..." in out
        assert "Riding Harley Davidson motorcycle with 1450cc engine" in out


class TestFactoryRegistry:
    """Test suite for create_factory."""

    def test_create_by_kind(self) -> None:
        factory = create_factory("truck", load_capacity=18, fuel_type="LNG")
        assert isinstance(factory, TruckFactory)
        assert factory.create_vehicle() == Truck(18, "LNG")

    def test_kind_is_case_insensitive(self) -> None:
        assert isinstance(create_factory("Car", model="Civic", year=2020), CarFactory)

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            create_factory("spaceship")
        assert exc_info.value.argument == "kind"
        assert exc_info.value.recoverable is True
        assert "car" in exc_info.value.context["known_kinds"]

    def test_wrong_params_raise(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            create_factory("car", brand="Ducati")
        assert exc_info.value.argument == "params"
