"""Payment domain enums."""

from enum import Enum


class PaymentSessionStatus(str, Enum):
    """Payment session status as the payment framework understands it."""

    AUTHORIZED = "authorized"
    CAPTURED = "captured"
    PENDING = "pending"
    REQUIRES_MORE = "requires_more"
    ERROR = "error"
    CANCELED = "canceled"


class PaymentAction(str, Enum):
    """Action the framework should take for an incoming webhook."""

    SUCCESSFUL = "captured"
    AUTHORIZED = "authorized"
    PENDING = "pending"
    REQUIRES_MORE = "requires_more"
    CANCELED = "canceled"
    FAILED = "failed"
    NOT_SUPPORTED = "not_supported"


class PayPalOrderStatus(str, Enum):
    """Order status values returned by PayPal Orders v2."""

    CREATED = "CREATED"
    SAVED = "SAVED"
    APPROVED = "APPROVED"
    VOIDED = "VOIDED"
    COMPLETED = "COMPLETED"
    PAYER_ACTION_REQUIRED = "PAYER_ACTION_REQUIRED"


class PayPalIntent(str, Enum):
    """Checkout intent of a PayPal order."""

    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"
