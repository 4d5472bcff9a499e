"""Shared fixtures: an in-memory PayPal served through httpx.MockTransport."""

import copy
import json
import re
from typing import Any

import httpx
import pytest

from paypal_payment.features.payments.infrastructure.adapters import (
    PayPalPaymentAdapter,
)
from paypal_payment.shared.infrastructure.http_clients import PayPalClient

OPTIONS = {
    "oAuthClientId": "test-client-id",
    "oAuthClientSecret": "test-client-secret",
    "environment": "sandbox",
}


class FakePayPal:
    """
    Minimal PayPal Orders/Payments API.

    Orders live in ``self.orders`` keyed by id. Every request is recorded
    in ``self.requests`` as ``(method, path, json_body)``.
    """

    def __init__(self) -> None:
        self.orders: dict[str, dict[str, Any]] = {}
        self.requests: list[tuple[str, str, Any]] = []
        self.token_requests = 0
        self._failures: list[tuple[str, int]] = []
        self._sequence = 0

    # -- test helpers -----------------------------------------------------

    def add_order(
        self,
        order_id: str,
        status: str = "CREATED",
        authorizations: list[str] | None = None,
        captures: list[str] | None = None,
        invoice_id: str | None = None,
        amount: str = "10.00",
        currency_code: str = "USD",
    ) -> dict[str, Any]:
        purchase_unit: dict[str, Any] = {
            "reference_id": "default",
            "amount": {"currency_code": currency_code, "value": amount},
        }
        if invoice_id is not None:
            purchase_unit["invoice_id"] = invoice_id
        if authorizations is not None or captures is not None:
            purchase_unit["payments"] = {
                "authorizations": [
                    {"id": auth_id, "status": "CREATED"}
                    for auth_id in authorizations or []
                ],
                "captures": [
                    {"id": capture_id, "status": "COMPLETED"}
                    for capture_id in captures or []
                ],
            }
        order = {
            "id": order_id,
            "status": status,
            "intent": "AUTHORIZE",
            "purchase_units": [purchase_unit],
            "links": [{"rel": "self", "href": f"/v2/checkout/orders/{order_id}"}],
        }
        self.orders[order_id] = order
        return copy.deepcopy(order)

    def session_data(self, order_id: str) -> dict[str, Any]:
        """Session ``data`` blob as the framework would hand it back."""
        return {
            "provider": "paypal",
            "paypalOrderId": order_id,
            "paypalOrder": copy.deepcopy(self.orders[order_id]),
        }

    def fail(self, path_fragment: str, status_code: int = 500) -> None:
        """Make the next request whose path contains ``path_fragment`` fail."""
        self._failures.append((path_fragment, status_code))

    @property
    def mutations(self) -> list[tuple[str, str, Any]]:
        return [r for r in self.requests if r[0] in ("POST", "PATCH")]

    # -- transport --------------------------------------------------------

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if path == "/v1/oauth2/token":
            self.token_requests += 1
            return httpx.Response(
                200, json={"access_token": "A21AA-token", "expires_in": 32400}
            )

        body = json.loads(request.content) if request.content else None

        self.requests.append((request.method, path, body))

        for index, (fragment, status_code) in enumerate(self._failures):
            if fragment in path:
                del self._failures[index]
                return httpx.Response(
                    status_code,
                    json={"name": "INTERNAL_SERVER_ERROR"},
                    headers={"paypal-debug-id": "debug-123"},
                )

        if path == "/v2/checkout/orders" and request.method == "POST":
            return self._create_order(body)

        if match := re.fullmatch(r"/v2/checkout/orders/([^/]+)", path):
            order = self.orders.get(match.group(1))
            if order is None:
                return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})
            if request.method == "PATCH":
                order["purchase_units"][0]["amount"] = body[0]["value"]
                return httpx.Response(204)
            return httpx.Response(200, json=order)

        if match := re.fullmatch(r"/v2/payments/authorizations/([^/]+)/(capture|void)", path):
            return self._authorization_action(match.group(1), match.group(2))

        if match := re.fullmatch(r"/v2/payments/captures/([^/]+)/refund", path):
            return self._refund(match.group(1), body or {})

        return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})

    def _create_order(self, body: dict[str, Any]) -> httpx.Response:
        self._sequence += 1
        order_id = f"O{self._sequence}"
        order = {
            "id": order_id,
            "status": "CREATED",
            "intent": body["intent"],
            "purchase_units": [
                {"reference_id": "default", **unit} for unit in body["purchase_units"]
            ],
        }
        self.orders[order_id] = order
        return httpx.Response(201, json=order)

    def _find(self, kind: str, resource_id: str) -> tuple[dict, dict] | None:
        for order in self.orders.values():
            payments = order["purchase_units"][0].get("payments", {})
            for resource in payments.get(kind, []):
                if resource["id"] == resource_id:
                    return order, resource
        return None

    def _authorization_action(self, authorization_id: str, action: str) -> httpx.Response:
        found = self._find("authorizations", authorization_id)
        if found is None:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})
        order, authorization = found

        if action == "void":
            authorization["status"] = "VOIDED"
            order["status"] = "VOIDED"
            return httpx.Response(204)

        authorization["status"] = "CAPTURED"
        captures = order["purchase_units"][0]["payments"].setdefault("captures", [])
        capture = {"id": f"C{len(captures) + 1}", "status": "COMPLETED"}
        captures.append(capture)
        order["status"] = "COMPLETED"
        return httpx.Response(201, json=capture)

    def _refund(self, capture_id: str, body: dict[str, Any]) -> httpx.Response:
        found = self._find("captures", capture_id)
        if found is None:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})
        order, capture = found

        if "amount" in body:
            capture["status"] = "PARTIALLY_REFUNDED"
        else:
            capture["status"] = "REFUNDED"
            order["status"] = "VOIDED"
        return httpx.Response(201, json={"id": f"R-{capture_id}", "status": "COMPLETED"})


@pytest.fixture
def fake_paypal() -> FakePayPal:
    return FakePayPal()


@pytest.fixture
def paypal_client(fake_paypal: FakePayPal) -> PayPalClient:
    return PayPalClient(
        client_id=OPTIONS["oAuthClientId"],
        client_secret=OPTIONS["oAuthClientSecret"],
        environment="sandbox",
        transport=httpx.MockTransport(fake_paypal.handle),
    )


@pytest.fixture
def adapter(paypal_client: PayPalClient) -> PayPalPaymentAdapter:
    return PayPalPaymentAdapter(dict(OPTIONS), client=paypal_client)
