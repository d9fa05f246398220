"""
Services that share the singleton Logger.

Invalid arguments are raised as InvalidArgumentError inside each
operation, caught at the same call site and recorded as an ERROR entry.
Callers receive a ServiceResult; the error never propagates out.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from ..config.defaults import PaymentParams
from ..errors import InvalidArgumentError
from .logger import Logger

Amount = Union[Decimal, int, float, str]


class ServiceStatus(Enum):
    """Outcome of a service operation."""
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ServiceResult:
    """Result of a service operation."""
    status: ServiceStatus
    message: Optional[str] = None
    error: Optional[InvalidArgumentError] = None

    @property
    def ok(self) -> bool:
        return self.status == ServiceStatus.SUCCESS


class UserService:
    """Registers users, logging through the shared Logger."""

    def __init__(self, logger: Optional[Logger] = None):
        self._logger = logger if logger is not None else Logger.get_instance()

    def register_user(self, username: Optional[str]) -> ServiceResult:
        try:
            if not username:
                raise InvalidArgumentError("Username cannot be empty",
                                           argument="username", value=username)

            message = f"User '{username}' registered successfully"
            self._logger.log_info(message)
            return ServiceResult(status=ServiceStatus.SUCCESS, message=message)

        except InvalidArgumentError as e:
            message = f"Failed to register user: {e.message}"
            self._logger.log_error(message)
            return ServiceResult(status=ServiceStatus.FAILED, message=message, error=e)


class PaymentService:
    """Processes payments, flagging large ones for verification."""

    def __init__(self, logger: Optional[Logger] = None,
                 params: Optional[PaymentParams] = None):
        self._logger = logger if logger is not None else Logger.get_instance()
        self.params = params or PaymentParams()

    def process_payment(self, user_id: str, amount: Amount) -> ServiceResult:
        try:
            value = _to_decimal(amount)
            if value <= 0:
                raise InvalidArgumentError("Payment amount must be positive",
                                           argument="amount", value=amount)

            message = f"Payment of ${value} processed for user '{user_id}'"
            self._logger.log_info(message)

            if value > self.params.large_payment_threshold:
                self._logger.log_warning(
                    f"Large payment of ${value} detected for user '{user_id}'. "
                    "Verification required."
                )
            return ServiceResult(status=ServiceStatus.SUCCESS, message=message)

        except InvalidArgumentError as e:
            message = f"Payment processing failed: {e.message}"
            self._logger.log_error(message)
            return ServiceResult(status=ServiceStatus.FAILED, message=message, error=e)


def _to_decimal(amount: Amount) -> Decimal:
    """Convert an amount to Decimal without binary float artifacts."""
    if isinstance(amount, Decimal):
        result = amount
    else:
        try:
            result = Decimal(str(amount))
        except ArithmeticError as e:
            raise InvalidArgumentError("Payment amount must be a number",
                                       argument="amount", value=amount) from e
    if not result.is_finite():
        raise InvalidArgumentError("Payment amount must be a number",
                                   argument="amount", value=amount)
    return result
