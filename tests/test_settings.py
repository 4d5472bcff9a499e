"""Tests for settings and the provider factory."""

import pytest

from paypal_payment.features.payments.infrastructure.adapters import (
    PayPalPaymentAdapter,
)
from paypal_payment.features.payments.infrastructure.provider_factory import (
    get_payment_provider,
)
from paypal_payment.shared.core.settings import get_settings
from paypal_payment.shared.domain.exceptions import ProviderConfigurationError


@pytest.fixture(autouse=True)
def clear_caches():
    get_settings.cache_clear()
    get_payment_provider.cache_clear()
    yield
    get_settings.cache_clear()
    get_payment_provider.cache_clear()


def test_provider_built_from_environment(monkeypatch):
    monkeypatch.setenv("PAYPAL_CLIENT_ID", "env-id")
    monkeypatch.setenv("PAYPAL_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("PAYPAL_ENVIRONMENT", "sandbox")

    provider = get_payment_provider()

    assert isinstance(provider, PayPalPaymentAdapter)
    assert provider.provider_name == "paypal"
    assert get_payment_provider() is provider


def test_invalid_environment_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("PAYPAL_CLIENT_ID", "env-id")
    monkeypatch.setenv("PAYPAL_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("PAYPAL_ENVIRONMENT", "live")

    with pytest.raises(ProviderConfigurationError, match="production or sandbox"):
        get_payment_provider()


def test_settings_expose_framework_option_names(monkeypatch):
    monkeypatch.setenv("PAYPAL_CLIENT_ID", "env-id")

    options = get_settings().paypal_options()

    assert options["oAuthClientId"] == "env-id"
    assert set(options) == {"oAuthClientId", "oAuthClientSecret", "environment"}
