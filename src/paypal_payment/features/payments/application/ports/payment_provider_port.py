"""Payment provider port (interface) - Adapter Pattern."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from paypal_payment.features.payments.domain.enums import (
    PaymentAction,
    PaymentSessionStatus,
)


@dataclass
class PaymentSessionInput:
    """Input carrying the session ``data`` blob the provider populated before."""

    data: dict[str, Any] = field(default_factory=dict)
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class InitiatePaymentInput:
    """Request to open a new payment session."""

    amount: Decimal
    currency_code: str
    data: dict[str, Any] = field(default_factory=dict)
    context: dict[str, Any] = field(default_factory=dict)


@dataclass
class UpdatePaymentInput(PaymentSessionInput):
    """Request to change the amount of an open session."""

    amount: Decimal = Decimal("0")
    currency_code: str = ""


@dataclass
class RefundPaymentInput(PaymentSessionInput):
    """Request to refund part or all of a captured session."""

    amount: Decimal = Decimal("0")


@dataclass
class PaymentSessionOutput:
    """Updated session ``data`` blob."""

    data: dict[str, Any] = field(default_factory=dict)


@dataclass
class InitiatePaymentOutput(PaymentSessionOutput):
    """New session: provider-side id plus the session ``data`` blob."""

    id: str = ""


@dataclass
class PaymentStatusOutput(PaymentSessionOutput):
    """Session ``data`` blob together with the reconciled status."""

    status: PaymentSessionStatus = PaymentSessionStatus.PENDING


@dataclass
class ProviderWebhookPayload:
    """Raw webhook as received by the framework."""

    data: dict[str, Any] = field(default_factory=dict)
    raw_data: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class WebhookActionResult:
    """Classification of a webhook."""

    action: PaymentAction
    data: dict[str, Any] | None = None


class PaymentProviderPort(ABC):
    """
    Abstract interface for payment providers (Adapter Pattern).

    Mirrors the payment session lifecycle the framework drives:
    initiate -> authorize -> capture / cancel -> refund.

    Implementations:
    - PayPalPaymentAdapter
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Get the provider name."""
        pass

    @staticmethod
    @abstractmethod
    def validate_options(options: dict[str, Any]) -> None:
        """Validate provider options at registration time."""
        pass

    @abstractmethod
    async def initiate_payment(
        self, payment: InitiatePaymentInput
    ) -> InitiatePaymentOutput:
        """Create the provider-side payment for a new session."""
        pass

    @abstractmethod
    async def authorize_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentStatusOutput:
        """Confirm authorization and report the session status."""
        pass

    @abstractmethod
    async def capture_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Capture an authorized payment."""
        pass

    @abstractmethod
    async def cancel_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Cancel a payment, refunding it if it was already captured."""
        pass

    @abstractmethod
    async def refund_payment(
        self, payment: RefundPaymentInput
    ) -> PaymentSessionOutput:
        """Refund part or all of a captured payment."""
        pass

    @abstractmethod
    async def retrieve_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Fetch the latest provider-side state."""
        pass

    @abstractmethod
    async def update_payment(
        self, payment: UpdatePaymentInput
    ) -> PaymentSessionOutput:
        """Change the amount of an open payment."""
        pass

    @abstractmethod
    async def get_payment_status(
        self, payment: PaymentSessionInput
    ) -> PaymentStatusOutput:
        """Reconcile the provider-side state to a session status."""
        pass

    @abstractmethod
    async def delete_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Release a session that is being discarded."""
        pass

    @abstractmethod
    async def get_webhook_action_and_data(
        self, payload: ProviderWebhookPayload
    ) -> WebhookActionResult:
        """Classify an incoming webhook."""
        pass

    async def aclose(self) -> None:
        """Release resources held by the provider."""
        return None
