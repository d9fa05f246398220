"""Weather station subject for the Observer pattern."""

from abc import ABC, abstractmethod

from ..logging.config import get_pattern_logger


class WeatherObserver(ABC):
    """Dependent notified whenever the station's measurements change."""

    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Receive a new reading. Must not call back into the station."""


class WeatherStation:
    """
    Subject holding the current reading and its registered observers.

    Observers are notified synchronously in registration order. A
    notification pass iterates over the observer list as it stood when the
    pass started, so registrations or removals made from inside an
    ``update`` call take effect from the next pass onwards.
    """

    def __init__(self):
        self._observers: list[WeatherObserver] = []
        self._temperature = 0.0
        self._humidity = 0.0
        self._pressure = 0.0
        self.logger = get_pattern_logger(__name__, "observer")

    def register_observer(self, observer: WeatherObserver) -> None:
        # Duplicates are allowed and receive one update per registration
        self._observers.append(observer)
        self.logger.info("Observer registered", observer=type(observer).__name__,
                         observer_count=len(self._observers))

    def remove_observer(self, observer: WeatherObserver) -> None:
        """Remove the first registration of ``observer``; unknown observers are ignored."""
        try:
            self._observers.remove(observer)
        except ValueError:
            self.logger.debug("Observer not registered", observer=type(observer).__name__)
            return
        self.logger.info("Observer removed", observer=type(observer).__name__,
                         observer_count=len(self._observers))

    def notify_observers(self) -> None:
        observers = tuple(self._observers)
        self.logger.debug("Notifying observers", observer_count=len(observers))
        for observer in observers:
            observer.update(self._temperature, self._humidity, self._pressure)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self._temperature = temperature
        self._humidity = humidity
        self._pressure = pressure
        self.logger.info("Weather measurements updated", temperature=temperature,
                         humidity=humidity, pressure=pressure)
        self.notify_observers()

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def humidity(self) -> float:
        return self._humidity

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def observers(self) -> tuple[WeatherObserver, ...]:
        return tuple(self._observers)

    def reading_lines(self) -> list[str]:
        """Human-readable lines for the current reading."""
        return [
            f"Temperature: {self._temperature}°C",
            f"Humidity: {self._humidity}%",
            f"Pressure: {self._pressure} hPa",
        ]
