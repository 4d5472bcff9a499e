"""HTTP client for the PayPal REST API (Orders v2 and Payments v2)."""

import asyncio
import time
import uuid
from typing import Any, Literal

import httpx

from paypal_payment.shared.core.logging import get_logger

PAYPAL_BASE_URLS: dict[str, str] = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "production": "https://api-m.paypal.com",
}

# Refresh the token this many seconds before PayPal expires it
TOKEN_EXPIRY_MARGIN = 60

log = get_logger(__name__)


class PayPalApiError(Exception):
    """Raised when PayPal answers with a non-2xx status code."""

    def __init__(
        self,
        status_code: int,
        headers: dict[str, str],
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.headers = headers
        self.body = body
        super().__init__(f"PayPal API responded with status {status_code}")


class PayPalResponseError(Exception):
    """Raised when a successful PayPal response cannot be decoded."""

    def __init__(self, status_code: int, headers: dict[str, str], body: str) -> None:
        self.status_code = status_code
        self.headers = headers
        self.body = body
        super().__init__(f"PayPal API sent an unreadable {status_code} response")


class PayPalClient:
    """
    Async client for the PayPal REST API.

    Holds one connection pool and one OAuth2 access token for its whole
    lifetime. The token is requested lazily with the client-credentials
    grant and reused until it is about to expire.

    No timeout is applied and nothing is retried: callers own both.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        environment: Literal["sandbox", "production"],
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self.environment = environment
        self.base_url = PAYPAL_BASE_URLS[environment]
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=None,
            transport=transport,
        )
        self._access_token: str | None = None
        self._token_expires_at = 0.0
        self._token_lock = asyncio.Lock()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    def _token_is_valid(self) -> bool:
        return bool(self._access_token) and self._token_expires_at > time.monotonic()

    async def _token(self) -> str:
        if self._token_is_valid():
            return self._access_token

        # Concurrent callers wait for a single refresh
        async with self._token_lock:
            if self._token_is_valid():
                return self._access_token

            response = await self._http.post(
                "/v1/oauth2/token",
                auth=(self._client_id, self._client_secret),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
            )
            if response.status_code != 200:
                raise PayPalApiError(
                    response.status_code, dict(response.headers), _body(response)
                )

            try:
                payload = response.json()
                access_token = payload["access_token"]
                expires_in = int(payload.get("expires_in", 0))
            except (ValueError, KeyError, TypeError, AttributeError) as e:
                raise _unreadable(response) from e

            self._access_token = access_token
            self._token_expires_at = time.monotonic() + max(
                expires_in - TOKEN_EXPIRY_MARGIN, 0
            )
            log.debug("paypal_token_refreshed", environment=self.environment)
            return self._access_token

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        mutating: bool = False,
    ) -> dict[str, Any]:
        token = await self._token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        if mutating:
            headers["PayPal-Request-Id"] = str(uuid.uuid4())

        response = await self._http.request(method, path, json=json, headers=headers)

        if response.status_code >= 300:
            raise PayPalApiError(
                response.status_code, dict(response.headers), _body(response)
            )
        if response.status_code == 204 or not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as e:
            raise _unreadable(response) from e
        if not isinstance(payload, dict):
            raise _unreadable(response)
        return payload

    async def create_order(self, body: dict[str, Any]) -> dict[str, Any]:
        """Create a checkout order."""
        return await self._request(
            "POST", "/v2/checkout/orders", json=body, mutating=True
        )

    async def get_order(self, order_id: str) -> dict[str, Any]:
        """Fetch the full representation of an order."""
        return await self._request("GET", f"/v2/checkout/orders/{order_id}")

    async def patch_order(
        self, order_id: str, operations: list[dict[str, Any]]
    ) -> None:
        """Apply JSON Patch operations to an order. PayPal answers 204."""
        await self._request(
            "PATCH", f"/v2/checkout/orders/{order_id}", json=operations
        )

    async def capture_authorization(self, authorization_id: str) -> dict[str, Any]:
        """Capture the full amount of an authorization."""
        return await self._request(
            "POST",
            f"/v2/payments/authorizations/{authorization_id}/capture",
            json={},
            mutating=True,
        )

    async def void_authorization(self, authorization_id: str) -> dict[str, Any]:
        """Void an authorization that was not captured."""
        return await self._request(
            "POST",
            f"/v2/payments/authorizations/{authorization_id}/void",
            mutating=True,
        )

    async def refund_capture(
        self,
        capture_id: str,
        amount: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Refund a capture. Without an amount the whole capture is refunded."""
        body = {"amount": amount} if amount is not None else {}
        return await self._request(
            "POST",
            f"/v2/payments/captures/{capture_id}/refund",
            json=body,
            mutating=True,
        )


def _unreadable(response: httpx.Response) -> PayPalResponseError:
    return PayPalResponseError(
        response.status_code, dict(response.headers), response.text
    )


def _body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
