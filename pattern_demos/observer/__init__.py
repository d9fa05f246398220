"""
Observer demonstration: a weather station and the displays subscribed to it.
"""
from .displays import CurrentConditionsDisplay, ForecastDisplay, StatisticsDisplay
from .station import WeatherObserver, WeatherStation

__all__ = [
    "WeatherObserver",
    "WeatherStation",
    "CurrentConditionsDisplay",
    "StatisticsDisplay",
    "ForecastDisplay",
]
