"""
Reconciliation of PayPal order state with the payment session lifecycle.

Pure functions: they read an order and decide, they never call PayPal.
Only single purchase unit orders are supported; anything else raises
``MultiplePurchaseUnitsError`` instead of silently using the first unit.
"""

from dataclasses import dataclass
from enum import Enum

from paypal_payment.features.payments.domain.entities import (
    PayPalOrder,
    PurchaseUnit,
    PurchaseUnitPayments,
)
from paypal_payment.features.payments.domain.enums import (
    PaymentSessionStatus,
    PayPalOrderStatus,
)
from paypal_payment.shared.domain.exceptions import (
    MultiplePurchaseUnitsError,
    PaymentPreconditionError,
    UncapturedPaymentError,
)

ORDER_STATUS_MAP: dict[str, PaymentSessionStatus] = {
    PayPalOrderStatus.CREATED.value: PaymentSessionStatus.PENDING,
    PayPalOrderStatus.SAVED.value: PaymentSessionStatus.REQUIRES_MORE,
    PayPalOrderStatus.APPROVED.value: PaymentSessionStatus.REQUIRES_MORE,
    PayPalOrderStatus.PAYER_ACTION_REQUIRED.value: PaymentSessionStatus.REQUIRES_MORE,
    PayPalOrderStatus.VOIDED.value: PaymentSessionStatus.CANCELED,
    PayPalOrderStatus.COMPLETED.value: PaymentSessionStatus.AUTHORIZED,
}


def map_order_status(status: str | None) -> PaymentSessionStatus:
    """Map a PayPal order status to a session status. Unknown values are pending."""
    if status is None:
        return PaymentSessionStatus.PENDING
    return ORDER_STATUS_MAP.get(status.upper(), PaymentSessionStatus.PENDING)


def single_purchase_unit(order: PayPalOrder, operation: str) -> PurchaseUnit:
    """Return the order's only purchase unit."""
    units = order.purchase_units
    if not units:
        raise PaymentPreconditionError(operation, "Order has no purchase unit")
    if len(units) > 1:
        raise MultiplePurchaseUnitsError(operation, len(units))
    return units[0]


def purchase_unit_payments(order: PayPalOrder, operation: str) -> PurchaseUnitPayments:
    """Return the payments recorded on the order's only purchase unit."""
    payments = single_purchase_unit(order, operation).payments
    if payments is None:
        raise PaymentPreconditionError(operation, "Order has no payments")
    return payments


def authorization_to_capture(order: PayPalOrder) -> str:
    """Id of the authorization a capture should be issued against."""
    payments = purchase_unit_payments(order, "capture_payment")
    if not payments.authorizations:
        raise PaymentPreconditionError(
            "capture_payment", "Order has no authorization to capture"
        )
    return payments.authorizations[0].id


def capture_to_refund(order: PayPalOrder) -> str:
    """Id of the capture a refund should be issued against."""
    payments = purchase_unit_payments(order, "refund_payment")
    if not payments.captures:
        raise UncapturedPaymentError()
    return payments.captures[0].id


def is_terminal(order: PayPalOrder) -> bool:
    """
    True when a cancel request has nothing left to do.

    A completed order with an invoice id is treated as fully refunded.
    TODO: confirm against refund totals on the captures; an invoice id
    alone does not prove the order was refunded.
    """
    status = (order.status or "").upper()
    if status == PayPalOrderStatus.VOIDED.value:
        return True
    if status == PayPalOrderStatus.COMPLETED.value:
        return bool(order.purchase_units and order.purchase_units[0].invoice_id)
    return False


class CancelAction(str, Enum):
    """What a cancel request turns into on PayPal's side."""

    NONE = "none"
    REFUND_CAPTURE = "refund_capture"
    VOID_AUTHORIZATION = "void_authorization"


@dataclass(frozen=True)
class CancelPlan:
    """Remote call a cancel request resolves to."""

    action: CancelAction
    target_id: str | None = None


def plan_cancel(order: PayPalOrder) -> CancelPlan:
    """
    Decide how to cancel the order.

    Terminal orders need no call. Captured orders are refunded in full,
    otherwise the authorization is voided.
    """
    if is_terminal(order):
        return CancelPlan(CancelAction.NONE)

    payments = purchase_unit_payments(order, "cancel_payment")

    if order.has_capture:
        return CancelPlan(CancelAction.REFUND_CAPTURE, payments.captures[0].id)

    if not payments.authorizations:
        raise PaymentPreconditionError(
            "cancel_payment", "Order has no authorization to void"
        )
    return CancelPlan(CancelAction.VOID_AUTHORIZATION, payments.authorizations[0].id)
