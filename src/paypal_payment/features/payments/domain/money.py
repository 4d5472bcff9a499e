"""Conversion of framework amounts to PayPal money objects."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from paypal_payment.features.payments.domain.entities import Money

# PayPal rejects decimals for these currencies
ZERO_DECIMAL_CURRENCIES = frozenset({"HUF", "JPY", "TWD"})


def currency_exponent(currency_code: str) -> int:
    """Number of minor-unit digits PayPal accepts for a currency."""
    return 0 if currency_code.upper() in ZERO_DECIMAL_CURRENCIES else 2


def to_paypal_money(amount: Decimal | int | float | str, currency_code: str) -> Money:
    """
    Render an amount in major units as a PayPal ``Money`` object.

    Raises:
        ValueError: if the amount is not a finite, non-negative number.
    """
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Not a number: {amount!r}") from e

    if not value.is_finite() or value < 0:
        raise ValueError(f"Amount must be a non-negative number: {amount!r}")

    exponent = currency_exponent(currency_code)
    quantum = Decimal(1).scaleb(-exponent)
    return Money(
        currency_code=currency_code.upper(),
        value=str(value.quantize(quantum, rounding=ROUND_HALF_UP)),
    )
