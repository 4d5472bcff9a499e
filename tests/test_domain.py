"""Tests for money conversion and the session payload record."""

from decimal import Decimal

import pytest

from paypal_payment.features.payments.domain.entities import (
    PayPalOrder,
    PayPalSessionData,
)
from paypal_payment.features.payments.domain.money import to_paypal_money


@pytest.mark.parametrize(
    "amount,currency,expected",
    [
        (Decimal("10"), "usd", ("USD", "10.00")),
        (Decimal("10.005"), "EUR", ("EUR", "10.01")),
        ("5", "USD", ("USD", "5.00")),
        (1500, "jpy", ("JPY", "1500")),
        (Decimal("99.5"), "HUF", ("HUF", "100")),
    ],
)
def test_to_paypal_money(amount, currency, expected):
    money = to_paypal_money(amount, currency)
    assert (money.currency_code, money.value) == expected


@pytest.mark.parametrize("amount", [Decimal("-1"), "abc", float("nan")])
def test_to_paypal_money_rejects_invalid_amounts(amount):
    with pytest.raises(ValueError):
        to_paypal_money(amount, "USD")


def test_session_data_round_trip_preserves_unknown_fields():
    """Framework keys and unread PayPal fields survive a load/dump cycle."""
    data = {
        "provider": "paypal",
        "session_id": "payses_01",
        "paypalOrderId": "O1",
        "paypalOrder": {
            "id": "O1",
            "status": "APPROVED",
            "create_time": "2024-01-01T00:00:00Z",
            "purchase_units": [
                {
                    "reference_id": "default",
                    "amount": {"currency_code": "USD", "value": "10.00"},
                    "payee": {"merchant_id": "M1"},
                }
            ],
        },
    }

    assert PayPalSessionData.from_data(data).to_data() == data


def test_session_data_with_order_replaces_order_and_id():
    session = PayPalSessionData.from_data({"cart_id": "cart_1"})
    order = PayPalOrder.model_validate({"id": "O2", "status": "CREATED"})

    data = session.with_order(order).to_data()

    assert data == {
        "cart_id": "cart_1",
        "provider": "paypal",
        "paypalOrderId": "O2",
        "paypalOrder": {"id": "O2", "status": "CREATED"},
    }


def test_session_data_order_id_prefers_embedded_order():
    session = PayPalSessionData.from_data(
        {"paypalOrderId": "stale", "paypalOrder": {"id": "O3"}}
    )
    assert session.order_id == "O3"

    assert PayPalSessionData.from_data({"paypalOrderId": "O4"}).order_id == "O4"
    assert PayPalSessionData.from_data(None).order_id is None


def test_order_has_capture():
    order = PayPalOrder.model_validate(
        {"id": "O1", "purchase_units": [{"payments": {"captures": [{"id": "C1"}]}}]}
    )
    assert order.has_capture
    assert not PayPalOrder.model_validate({"id": "O1", "purchase_units": [{}]}).has_capture
