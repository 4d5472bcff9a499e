"""Payment infrastructure layer."""

from paypal_payment.features.payments.infrastructure.provider_factory import (
    get_payment_provider,
)

__all__ = ["get_payment_provider"]
