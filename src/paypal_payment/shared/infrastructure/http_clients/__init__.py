"""HTTP clients for external services."""

from paypal_payment.shared.infrastructure.http_clients.paypal_client import (
    PAYPAL_BASE_URLS,
    PayPalApiError,
    PayPalClient,
    PayPalResponseError,
)

__all__ = ["PAYPAL_BASE_URLS", "PayPalApiError", "PayPalClient", "PayPalResponseError"]
