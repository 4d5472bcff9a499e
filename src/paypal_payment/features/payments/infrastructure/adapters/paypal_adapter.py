"""PayPal Payment Provider Adapter."""

from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Literal

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from paypal_payment.features.payments.application.ports import (
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
from paypal_payment.features.payments.domain.entities import (
    Money,
    PayPalOrder,
    PayPalSessionData,
)
from paypal_payment.features.payments.domain.enums import (
    PaymentAction,
    PayPalIntent,
)
from paypal_payment.features.payments.domain.money import to_paypal_money
from paypal_payment.features.payments.domain.reconciliation import (
    CancelAction,
    authorization_to_capture,
    capture_to_refund,
    map_order_status,
    plan_cancel,
    single_purchase_unit,
)
from paypal_payment.shared.core.logging import get_logger
from paypal_payment.shared.domain.exceptions import (
    InvalidAmountError,
    PaymentPreconditionError,
    PaymentProviderError,
    ProviderConfigurationError,
)
from paypal_payment.shared.infrastructure.http_clients import (
    PayPalApiError,
    PayPalClient,
    PayPalResponseError,
)

log = get_logger(__name__)


class PayPalProviderOptions(BaseModel):
    """Options the provider is registered with."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    client_id: str = Field(alias="oAuthClientId", min_length=1)
    client_secret: str = Field(alias="oAuthClientSecret", min_length=1)
    environment: Literal["sandbox", "production"]


class PayPalPaymentAdapter(PaymentProviderPort):
    """
    PayPal payment provider adapter.

    Orders are created with the AUTHORIZE intent and approved by the buyer
    in the storefront. Every operation round-trips the full PayPal order
    through the session ``data`` blob; PayPal stays the source of truth.
    """

    identifier = "paypal-payment"

    def __init__(
        self,
        options: dict[str, Any],
        client: PayPalClient | None = None,
    ) -> None:
        self.validate_options(options)
        self._options = PayPalProviderOptions.model_validate(options)
        self._client = client or PayPalClient(
            client_id=self._options.client_id,
            client_secret=self._options.client_secret,
            environment=self._options.environment,
        )

    @property
    def provider_name(self) -> str:
        """Get the provider name."""
        return "paypal"

    @staticmethod
    def validate_options(options: dict[str, Any]) -> None:
        """
        Validate provider options.

        Accepts the framework's camelCase option names as well as
        snake_case ones.
        """
        if not (options.get("oAuthClientId") or options.get("client_id")):
            raise ProviderConfigurationError(
                "oAuthClientId is required in the provider's options."
            )
        if not (options.get("oAuthClientSecret") or options.get("client_secret")):
            raise ProviderConfigurationError(
                "oAuthClientSecret is required in the provider's options."
            )
        if options.get("environment") not in ("sandbox", "production"):
            raise ProviderConfigurationError(
                "environment needs to be either production or sandbox"
            )

    async def aclose(self) -> None:
        """Release the PayPal client."""
        await self._client.aclose()

    async def initiate_payment(
        self, payment: InitiatePaymentInput
    ) -> InitiatePaymentOutput:
        """
        Create a PayPal order with the AUTHORIZE intent.

        The order holds exactly one purchase unit for the session amount.
        """
        session = self._load_session(payment, "initiate_payment")
        money = self._money(payment.amount, payment.currency_code, "initiate_payment")
        body = {
            "intent": PayPalIntent.AUTHORIZE.value,
            "purchase_units": [{"amount": money.model_dump()}],
        }

        with self._remote_call("initiate_payment"):
            raw = await self._client.create_order(body)

        order = self._parse_order(raw, "initiate_payment")
        log.info("paypal_order_created", order_id=order.id, status=order.status)

        return InitiatePaymentOutput(
            id=order.id, data=session.with_order(order).to_data()
        )

    async def authorize_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentStatusOutput:
        """
        Reflect the authorization done by the buyer at checkout.

        No authorize call is issued: the order is refreshed and its status
        reconciled.
        """
        session = self._load_session(payment, "authorize_payment")
        self._stored_order(session, "authorize_payment")

        order = await self._fetch_order(session, "authorize_payment")
        return PaymentStatusOutput(
            data=session.with_order(order).to_data(),
            status=map_order_status(order.status),
        )

    async def capture_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Capture the order's authorization."""
        session = self._load_session(payment, "capture_payment")
        order = self._stored_order(session, "capture_payment")
        authorization_id = authorization_to_capture(order)

        with self._remote_call("capture_payment"):
            await self._client.capture_authorization(authorization_id)
        log.info(
            "paypal_authorization_captured",
            order_id=order.id,
            authorization_id=authorization_id,
        )

        order = await self._fetch_order(session, "capture_payment")
        return PaymentSessionOutput(data=session.with_order(order).to_data())

    async def cancel_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """
        Cancel the order.

        Voided orders, and completed orders already invoiced, are returned
        as they are without calling PayPal. A captured order is refunded in
        full, an authorized one is voided.
        """
        session = self._load_session(payment, "cancel_payment")
        order = self._stored_order(session, "cancel_payment")
        plan = plan_cancel(order)

        if plan.action is CancelAction.NONE:
            log.info("paypal_cancel_skipped", order_id=order.id, status=order.status)
            return PaymentSessionOutput(data=session.to_data())

        with self._remote_call("cancel_payment"):
            if plan.action is CancelAction.REFUND_CAPTURE:
                await self._client.refund_capture(plan.target_id)
            else:
                await self._client.void_authorization(plan.target_id)
        log.info(
            "paypal_order_canceled",
            order_id=order.id,
            action=plan.action.value,
            target_id=plan.target_id,
        )

        order = await self._fetch_order(session, "cancel_payment")
        return PaymentSessionOutput(data=session.with_order(order).to_data())

    async def refund_payment(
        self, payment: RefundPaymentInput
    ) -> PaymentSessionOutput:
        """Refund ``amount`` from the order's capture, in the order's currency."""
        session = self._load_session(payment, "refund_payment")
        order = self._stored_order(session, "refund_payment")
        capture_id = capture_to_refund(order)

        purchase_unit = single_purchase_unit(order, "refund_payment")
        if purchase_unit.amount is None:
            raise PaymentPreconditionError(
                "refund_payment", "Purchase unit has no amount"
            )
        money = self._money(
            payment.amount, purchase_unit.amount.currency_code, "refund_payment"
        )

        with self._remote_call("refund_payment"):
            await self._client.refund_capture(capture_id, money.model_dump())
        log.info(
            "paypal_capture_refunded",
            order_id=order.id,
            capture_id=capture_id,
            amount=money.value,
            currency=money.currency_code,
        )

        order = await self._fetch_order(session, "refund_payment")
        return PaymentSessionOutput(data=session.with_order(order).to_data())

    async def retrieve_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """Fetch the order stored in the session."""
        session = self._load_session(payment, "retrieve_payment")
        self._stored_order(session, "retrieve_payment")
        order = await self._fetch_order(session, "retrieve_payment")
        return PaymentSessionOutput(data=session.with_order(order).to_data())

    async def update_payment(
        self, payment: UpdatePaymentInput
    ) -> PaymentSessionOutput:
        """Replace the order amount, then refresh the order."""
        session = self._load_session(payment, "update_payment")
        order = self._stored_order(session, "update_payment")
        purchase_unit = single_purchase_unit(order, "update_payment")
        money = self._money(payment.amount, payment.currency_code, "update_payment")

        reference_id = purchase_unit.reference_id or "default"
        operations = [
            {
                "op": "replace",
                "path": f"/purchase_units/@reference_id=='{reference_id}'/amount",
                "value": money.model_dump(),
            }
        ]
        with self._remote_call("update_payment"):
            await self._client.patch_order(session.order_id, operations)
        log.info(
            "paypal_order_updated",
            order_id=session.order_id,
            amount=money.value,
            currency=money.currency_code,
        )

        order = await self._fetch_order(session, "update_payment")
        return PaymentSessionOutput(data=session.with_order(order).to_data())

    async def get_payment_status(
        self, payment: PaymentSessionInput
    ) -> PaymentStatusOutput:
        """Refresh the order and reconcile its status."""
        session = self._load_session(payment, "get_payment_status")
        self._stored_order(session, "get_payment_status")

        order = await self._fetch_order(session, "get_payment_status")
        return PaymentStatusOutput(
            data=session.with_order(order).to_data(),
            status=map_order_status(order.status),
        )

    async def delete_payment(
        self, payment: PaymentSessionInput
    ) -> PaymentSessionOutput:
        """PayPal has no order deletion; the session data is returned as is."""
        return PaymentSessionOutput(data=dict(payment.data))

    async def get_webhook_action_and_data(
        self, payload: ProviderWebhookPayload
    ) -> WebhookActionResult:
        """Webhooks are not used for reconciliation."""
        log.debug("paypal_webhook_ignored", event_type=payload.data.get("event_type"))
        return WebhookActionResult(action=PaymentAction.NOT_SUPPORTED)

    def _load_session(
        self, payment: PaymentSessionInput | InitiatePaymentInput, operation: str
    ) -> PayPalSessionData:
        try:
            return PayPalSessionData.from_data(payment.data)
        except ValidationError as e:
            raise PaymentPreconditionError(
                operation, "Session data does not hold a PayPal order"
            ) from e

    def _stored_order(self, session: PayPalSessionData, operation: str) -> PayPalOrder:
        if session.paypal_order is None or not session.paypal_order.id:
            raise PaymentPreconditionError(operation, "Session holds no PayPal order")
        return session.paypal_order

    def _money(
        self, amount: Decimal | int | float | str, currency_code: str, operation: str
    ) -> Money:
        try:
            return to_paypal_money(amount, currency_code)
        except ValueError as e:
            raise InvalidAmountError(operation, amount) from e

    async def _fetch_order(
        self, session: PayPalSessionData, operation: str
    ) -> PayPalOrder:
        order_id = session.order_id
        if not order_id:
            raise PaymentPreconditionError(operation, "Session holds no PayPal order id")

        with self._remote_call(operation):
            raw = await self._client.get_order(order_id)
        return self._parse_order(raw, operation)

    def _parse_order(self, raw: dict[str, Any], operation: str) -> PayPalOrder:
        try:
            order = PayPalOrder.model_validate(raw)
        except ValidationError as e:
            log.error("paypal_order_invalid", operation=operation, errors=e.errors())
            raise PaymentProviderError(self.provider_name, operation) from e

        if not order.id:
            log.error("paypal_order_missing_id", operation=operation)
            raise PaymentProviderError(self.provider_name, operation)
        return order

    @contextmanager
    def _remote_call(self, operation: str) -> Iterator[None]:
        """Log a failed PayPal call and re-raise it as a provider error."""
        try:
            yield
        except PayPalApiError as e:
            log.error(
                "paypal_api_error",
                operation=operation,
                status_code=e.status_code,
                headers=e.headers,
            )
            raise PaymentProviderError(
                self.provider_name, operation, e.status_code
            ) from e
        except PayPalResponseError as e:
            log.error(
                "paypal_response_unreadable",
                operation=operation,
                status_code=e.status_code,
                headers=e.headers,
            )
            raise PaymentProviderError(self.provider_name, operation) from e
        except httpx.HTTPError as e:
            log.error("paypal_request_failed", operation=operation, error=str(e))
            raise PaymentProviderError(self.provider_name, operation) from e
