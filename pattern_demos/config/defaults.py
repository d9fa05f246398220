"""Default configuration parameters for the pattern demonstrations."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LoggerParams:
    """Singleton logger entry formatting."""
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class PaymentParams:
    """Payment service thresholds."""
    large_payment_threshold: Decimal = Decimal("1000")   # WARNING above this amount


@dataclass(frozen=True)
class ThreadingParams:
    """Concurrent singleton access test parameters."""
    thread_count: int = 5
    hold_seconds: float = 0.1          # Sleep after logging, keeps threads overlapping


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic (structlog) output parameters."""
    level: str = "WARNING"
    format_json: bool = False


@dataclass(frozen=True)
class DemoConfig:
    """Complete default configuration."""
    logger: LoggerParams
    payment: PaymentParams
    threading: ThreadingParams
    logging: LoggingParams


def get_default_config() -> DemoConfig:
    """Get the default configuration instance."""
    return DemoConfig(
        logger=LoggerParams(),
        payment=PaymentParams(),
        threading=ThreadingParams(),
        logging=LoggingParams(),
    )
