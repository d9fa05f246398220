"""
Display devices observing a weather station.

Each display derives its view only from the readings it has received
through ``update``; none of them reads the station directly.
"""

from abc import abstractmethod
from typing import Optional

from .station import WeatherObserver, WeatherStation

FORECAST_IMPROVING = "Improving weather on the way!"
FORECAST_RAINY = "Cooler, rainy weather coming."
FORECAST_UNCHANGED = "More of the same."


class _StationDisplay(WeatherObserver):
    """Registers itself with a station when one is given."""

    def __init__(self, station: Optional[WeatherStation] = None):
        if station is not None:
            station.register_observer(self)

    @abstractmethod
    def display(self) -> str:
        """Render this display's derived view."""


class CurrentConditionsDisplay(_StationDisplay):
    """Shows the most recent reading."""

    def __init__(self, station: Optional[WeatherStation] = None):
        self.temperature = 0.0
        self.humidity = 0.0
        self.pressure = 0.0
        self.update_count = 0
        super().__init__(station)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.pressure = pressure
        self.update_count += 1

    def display(self) -> str:
        return (
            f"[CurrentConditions] Temp: {self.temperature}°C, "
            f"Humidity: {self.humidity}%, Pressure: {self.pressure} hPa"
        )


class StatisticsDisplay(_StationDisplay):
    """Tracks the temperature history and reports min, max and average."""

    def __init__(self, station: Optional[WeatherStation] = None):
        self._temperature_history: list[float] = []
        super().__init__(station)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self._temperature_history.append(temperature)

    @property
    def temperature_history(self) -> list[float]:
        return list(self._temperature_history)

    @property
    def min_temperature(self) -> Optional[float]:
        return min(self._temperature_history) if self._temperature_history else None

    @property
    def max_temperature(self) -> Optional[float]:
        return max(self._temperature_history) if self._temperature_history else None

    @property
    def average_temperature(self) -> Optional[float]:
        if not self._temperature_history:
            return None
        return sum(self._temperature_history) / len(self._temperature_history)

    def display(self) -> str:
        if not self._temperature_history:
            return "[Statistics] No temperature readings yet."
        return (
            f"[Statistics] Min Temp: {self.min_temperature}°C, "
            f"Max Temp: {self.max_temperature}°C, "
            f"Avg Temp: {self.average_temperature:.2f}°C"
        )


class ForecastDisplay(_StationDisplay):
    """Classifies the pressure trend between the last two readings."""

    def __init__(self, station: Optional[WeatherStation] = None):
        self.last_pressure = 0.0
        self.current_pressure = 0.0
        super().__init__(station)

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure

    @property
    def forecast(self) -> str:
        if self.current_pressure > self.last_pressure:
            return FORECAST_IMPROVING
        if self.current_pressure < self.last_pressure:
            return FORECAST_RAINY
        return FORECAST_UNCHANGED

    def display(self) -> str:
        return f"[Forecast] Forecast: {self.forecast}"
