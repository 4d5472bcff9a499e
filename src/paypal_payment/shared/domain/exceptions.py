"""Domain exceptions for the PayPal payment provider."""

from enum import Enum


class ErrorKind(str, Enum):
    """Coarse error category, so callers never parse messages."""

    CONFIGURATION = "configuration"
    PRECONDITION = "precondition"
    PROVIDER = "provider"


class PaymentError(Exception):
    """Base exception for payment errors."""

    kind: ErrorKind = ErrorKind.PROVIDER


class ProviderConfigurationError(PaymentError):
    """Raised when provider options are missing or invalid."""

    kind = ErrorKind.CONFIGURATION

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PaymentPreconditionError(PaymentError):
    """Raised when the stored order lacks the data an operation requires."""

    kind = ErrorKind.PRECONDITION

    def __init__(self, operation: str, reason: str) -> None:
        self.operation = operation
        self.reason = reason
        super().__init__(f"{reason} ({operation})")


class UncapturedPaymentError(PaymentPreconditionError):
    """Raised when refunding an order that has no capture yet."""

    def __init__(self, operation: str = "refund_payment") -> None:
        super().__init__(operation, "Cannot refund an uncaptured payment")


class MultiplePurchaseUnitsError(PaymentPreconditionError):
    """Raised when an order carries more than one purchase unit."""

    def __init__(self, operation: str, count: int) -> None:
        self.count = count
        super().__init__(
            operation,
            f"Only single purchase unit orders are supported, got {count}",
        )


class InvalidAmountError(PaymentPreconditionError):
    """Raised when an amount cannot be sent to the provider."""

    def __init__(self, operation: str, amount: object) -> None:
        self.amount = amount
        super().__init__(operation, f"Invalid amount '{amount}'")


class PaymentProviderError(PaymentError):
    """Raised when a remote call to the payment provider fails."""

    kind = ErrorKind.PROVIDER

    def __init__(
        self, provider: str, operation: str, status_code: int | None = None
    ) -> None:
        self.provider = provider
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"An error occurred in {operation}")
