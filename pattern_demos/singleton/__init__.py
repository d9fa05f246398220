"""
Singleton demonstration: a lazily created, thread-safe Logger and the
services that share it.
"""
from .logger import LogEntry, Logger, LogLevel
from .services import PaymentService, ServiceResult, ServiceStatus, UserService
from .threading_demo import run_threading_test

__all__ = [
    "Logger",
    "LogEntry",
    "LogLevel",
    "UserService",
    "PaymentService",
    "ServiceResult",
    "ServiceStatus",
    "run_threading_test",
]
