"""Payment application ports."""

from paypal_payment.features.payments.application.ports.payment_provider_port import (
    InitiatePaymentInput,
    InitiatePaymentOutput,
    PaymentProviderPort,
    PaymentSessionInput,
    PaymentSessionOutput,
    PaymentStatusOutput,
    ProviderWebhookPayload,
    RefundPaymentInput,
    UpdatePaymentInput,
    WebhookActionResult,
)

__all__ = [
    "InitiatePaymentInput",
    "InitiatePaymentOutput",
    "PaymentProviderPort",
    "PaymentSessionInput",
    "PaymentSessionOutput",
    "PaymentStatusOutput",
    "ProviderWebhookPayload",
    "RefundPaymentInput",
    "UpdatePaymentInput",
    "WebhookActionResult",
]
