"""
Pattern Demos - Classic Object-Oriented Design Pattern Demonstrations

Three standalone demonstrations: a Factory Method for building vehicles,
a thread-safe lazily initialized Singleton logger, and an Observer based
weather station with several display devices.
"""

__version__ = "0.1.0"
__author__ = "Pattern Demos Team"
