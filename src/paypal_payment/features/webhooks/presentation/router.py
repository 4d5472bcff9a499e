"""Webhook receiver router."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request

from paypal_payment.features.payments.application.ports import (
    PaymentProviderPort,
    ProviderWebhookPayload,
)
from paypal_payment.features.payments.presentation.router import get_provider
from paypal_payment.shared.core.logging import get_logger
from paypal_payment.shared.presentation.api_response import APIResponse

router = APIRouter()

log = get_logger(__name__)


@router.post(
    "/paypal",
    response_model=APIResponse[dict[str, Any]],
    summary="PayPal webhook receiver",
    description="""
    Receives PayPal webhook events.

    Webhooks are not used to reconcile payments: every event is
    acknowledged and classified as `not_supported`.
    """,
)
async def paypal_webhook(
    request: Request,
    provider: Annotated[PaymentProviderPort, Depends(get_provider)],
) -> APIResponse[dict[str, Any]]:
    """Classify a PayPal webhook event."""
    raw_body = await request.body()

    try:
        data = json.loads(raw_body) if raw_body else {}
    except json.JSONDecodeError:
        log.warning("paypal_webhook_invalid_json", size=len(raw_body))
        data = {}

    result = await provider.get_webhook_action_and_data(
        ProviderWebhookPayload(
            data=data if isinstance(data, dict) else {},
            raw_data=raw_body,
            headers=dict(request.headers),
        )
    )
    return APIResponse.ok(
        data={"action": result.action.value, "data": result.data},
        message="Webhook received",
    )
