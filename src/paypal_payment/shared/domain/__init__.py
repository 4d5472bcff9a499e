"""Shared domain module - Exceptions and types."""

from paypal_payment.shared.domain.exceptions import (
    ErrorKind,
    InvalidAmountError,
    MultiplePurchaseUnitsError,
    PaymentError,
    PaymentPreconditionError,
    PaymentProviderError,
    ProviderConfigurationError,
    UncapturedPaymentError,
)

__all__ = [
    "ErrorKind",
    "InvalidAmountError",
    "MultiplePurchaseUnitsError",
    "PaymentError",
    "PaymentPreconditionError",
    "PaymentProviderError",
    "ProviderConfigurationError",
    "UncapturedPaymentError",
]
