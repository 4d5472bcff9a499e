"""Shared infrastructure module."""

from paypal_payment.shared.infrastructure.http_clients import (
    PAYPAL_BASE_URLS,
    PayPalApiError,
    PayPalClient,
)

__all__ = [
    "PAYPAL_BASE_URLS",
    "PayPalApiError",
    "PayPalClient",
]
