"""Payment domain entities and value objects."""

from paypal_payment.features.payments.domain.entities import (
    Authorization,
    Capture,
    Money,
    PayPalOrder,
    PayPalSessionData,
    PurchaseUnit,
    PurchaseUnitPayments,
)
from paypal_payment.features.payments.domain.enums import (
    PaymentAction,
    PaymentSessionStatus,
    PayPalIntent,
    PayPalOrderStatus,
)

__all__ = [
    "Authorization",
    "Capture",
    "Money",
    "PayPalOrder",
    "PayPalSessionData",
    "PurchaseUnit",
    "PurchaseUnitPayments",
    "PaymentAction",
    "PaymentSessionStatus",
    "PayPalIntent",
    "PayPalOrderStatus",
]
