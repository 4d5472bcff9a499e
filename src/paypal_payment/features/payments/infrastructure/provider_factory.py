"""Payment provider factory - Dependency injection."""

from functools import lru_cache

from paypal_payment.features.payments.application.ports import PaymentProviderPort
from paypal_payment.features.payments.infrastructure.adapters import (
    PayPalPaymentAdapter,
)
from paypal_payment.shared.core.settings import get_settings


@lru_cache
def get_payment_provider() -> PaymentProviderPort:
    """
    Get the PayPal provider configured from settings.

    Raises ProviderConfigurationError when the PayPal options are
    incomplete, so a misconfigured service fails on first use.
    """
    settings = get_settings()
    return PayPalPaymentAdapter(settings.paypal_options())
