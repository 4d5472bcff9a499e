"""Payment session DTOs for API requests/responses."""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from paypal_payment.features.payments.domain.enums import PaymentSessionStatus


class PaymentSessionRequest(BaseModel):
    """Session ``data`` blob sent back by the framework."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "data": {
                    "provider": "paypal",
                    "paypalOrderId": "5O190127TN364715T",
                    "paypalOrder": {
                        "id": "5O190127TN364715T",
                        "status": "COMPLETED",
                        "purchase_units": [],
                    },
                },
            }
        },
    )

    data: dict[str, Any] = Field(default_factory=dict)
    context: dict[str, Any] = Field(default_factory=dict)


class _AmountMixin(BaseModel):
    @field_validator("amount", mode="before", check_fields=False)
    @classmethod
    def parse_amount(cls, v: Any) -> Decimal:
        """Parse amount to Decimal."""
        try:
            return Decimal(v if isinstance(v, str) else str(v))
        except InvalidOperation as e:
            raise ValueError(f"Invalid amount: {v!r}") from e


class InitiatePaymentRequest(_AmountMixin):
    """Request to open a payment session."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"amount": "10.00", "currencyCode": "usd"}},
    )

    amount: Decimal = Field(..., ge=0, description="Amount in major units")
    currency_code: str = Field(
        ..., alias="currencyCode", min_length=3, max_length=3
    )
    data: dict[str, Any] = Field(default_factory=dict)
    context: dict[str, Any] = Field(default_factory=dict)


class UpdatePaymentRequest(PaymentSessionRequest, _AmountMixin):
    """Request to change a session amount."""

    amount: Decimal = Field(..., ge=0)
    currency_code: str = Field(
        ..., alias="currencyCode", min_length=3, max_length=3
    )


class RefundPaymentRequest(PaymentSessionRequest, _AmountMixin):
    """Request to refund part or all of a captured session."""

    amount: Decimal = Field(..., gt=0)


class PaymentSessionResponse(BaseModel):
    """Updated session ``data`` blob."""

    data: dict[str, Any]


class InitiatePaymentResponse(PaymentSessionResponse):
    """New session id and ``data`` blob."""

    id: str


class PaymentStatusResponse(PaymentSessionResponse):
    """Session ``data`` blob with the reconciled status."""

    status: PaymentSessionStatus
