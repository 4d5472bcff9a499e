"""PayPal order model and the session payload the adapter owns."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class VendorModel(BaseModel):
    """Base for PayPal resources: unread fields are kept and dumped back."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Money(VendorModel):
    """Amount in PayPal's wire format."""

    currency_code: str
    value: str


class Authorization(VendorModel):
    """Reserved, not yet captured payment."""

    id: str
    status: str | None = None
    amount: Money | None = None


class Capture(VendorModel):
    """Settled transfer of funds."""

    id: str
    status: str | None = None
    amount: Money | None = None


class PurchaseUnitPayments(VendorModel):
    """Payments recorded against a purchase unit."""

    authorizations: list[Authorization] = Field(default_factory=list)
    captures: list[Capture] = Field(default_factory=list)


class PurchaseUnit(VendorModel):
    """One purchase unit of an order."""

    reference_id: str | None = None
    amount: Money | None = None
    invoice_id: str | None = None
    payments: PurchaseUnitPayments | None = None


class PayPalOrder(VendorModel):
    """
    A PayPal Orders v2 order.

    ``status`` stays a plain string: PayPal may add values and those
    must still load (they reconcile to ``pending``).
    """

    id: str | None = None
    status: str | None = None
    intent: str | None = None
    purchase_units: list[PurchaseUnit] = Field(default_factory=list)

    @property
    def has_capture(self) -> bool:
        """True when any purchase unit already holds a capture."""
        return any(
            pu.payments is not None and pu.payments.captures
            for pu in self.purchase_units
        )


class PayPalSessionData(BaseModel):
    """
    Adapter-owned record stored in the framework's session ``data`` blob.

    The framework treats it as opaque. Keys that do not belong to the
    adapter are preserved across every round trip.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    provider: Literal["paypal"] = "paypal"
    paypal_order_id: str | None = Field(default=None, alias="paypalOrderId")
    paypal_order: PayPalOrder | None = Field(default=None, alias="paypalOrder")

    @classmethod
    def from_data(cls, data: dict[str, Any] | None) -> "PayPalSessionData":
        """Load the record from a framework ``data`` blob."""
        return cls.model_validate(data or {})

    def to_data(self) -> dict[str, Any]:
        """Serialise back into a framework ``data`` blob."""
        # exclude_unset keeps vendor payloads byte-for-byte: no injected nulls
        data = self.model_dump(by_alias=True, mode="json", exclude_unset=True)
        data["provider"] = self.provider
        return data

    def with_order(self, order: PayPalOrder) -> "PayPalSessionData":
        """Copy of this record holding a freshly fetched order."""
        return self.model_copy(
            update={"paypal_order_id": order.id, "paypal_order": order}
        )

    @property
    def order_id(self) -> str | None:
        """Order id, preferring the embedded order over the denormalised field."""
        if self.paypal_order is not None and self.paypal_order.id:
            return self.paypal_order.id
        return self.paypal_order_id
