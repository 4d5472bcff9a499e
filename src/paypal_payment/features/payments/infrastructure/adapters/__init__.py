"""Payment infrastructure adapters."""

from paypal_payment.features.payments.infrastructure.adapters.paypal_adapter import (
    PayPalPaymentAdapter,
    PayPalProviderOptions,
)

__all__ = ["PayPalPaymentAdapter", "PayPalProviderOptions"]
