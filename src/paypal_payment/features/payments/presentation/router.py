"""Payment session API router."""

from typing import Annotated

from fastapi import APIRouter, Depends

from paypal_payment.features.payments.application.ports import (
    InitiatePaymentInput,
    PaymentProviderPort,
    PaymentSessionInput,
    PaymentSessionOutput,
    PaymentStatusOutput,
    RefundPaymentInput,
    UpdatePaymentInput,
)
from paypal_payment.features.payments.infrastructure.provider_factory import (
    get_payment_provider,
)
from paypal_payment.features.payments.presentation.dto import (
    InitiatePaymentRequest,
    InitiatePaymentResponse,
    PaymentSessionRequest,
    PaymentSessionResponse,
    PaymentStatusResponse,
    RefundPaymentRequest,
    UpdatePaymentRequest,
)
from paypal_payment.shared.presentation.api_response import APIResponse

router = APIRouter()


def get_provider() -> PaymentProviderPort:
    """Dependency for getting the payment provider."""
    return get_payment_provider()


Provider = Annotated[PaymentProviderPort, Depends(get_provider)]


def _session_input(request: PaymentSessionRequest) -> PaymentSessionInput:
    return PaymentSessionInput(data=request.data, context=request.context)


def _session_response(
    output: PaymentSessionOutput, message: str
) -> APIResponse[PaymentSessionResponse]:
    return APIResponse.ok(data=PaymentSessionResponse(data=output.data), message=message)


def _status_response(
    output: PaymentStatusOutput, message: str
) -> APIResponse[PaymentStatusResponse]:
    return APIResponse.ok(
        data=PaymentStatusResponse(data=output.data, status=output.status),
        message=message,
    )


@router.post(
    "",
    response_model=APIResponse[InitiatePaymentResponse],
    status_code=201,
    summary="Open a payment session",
    description="""
    Create a PayPal order with the AUTHORIZE intent.

    - The order holds a single purchase unit for the given amount
    - The returned `data` must be sent back on every later call
    """,
)
async def initiate_payment(
    request: InitiatePaymentRequest, provider: Provider
) -> APIResponse[InitiatePaymentResponse]:
    """Open a payment session."""
    output = await provider.initiate_payment(
        InitiatePaymentInput(
            amount=request.amount,
            currency_code=request.currency_code,
            data=request.data,
            context=request.context,
        )
    )
    return APIResponse.ok(
        data=InitiatePaymentResponse(id=output.id, data=output.data),
        message="Payment session created",
    )


@router.post(
    "/authorize",
    response_model=APIResponse[PaymentStatusResponse],
    summary="Confirm a payment authorization",
)
async def authorize_payment(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentStatusResponse]:
    """Refresh the order and reconcile its status."""
    output = await provider.authorize_payment(_session_input(request))
    return _status_response(output, "Payment session authorized")


@router.post(
    "/capture",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Capture an authorized payment",
)
async def capture_payment(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Capture the order's authorization."""
    output = await provider.capture_payment(_session_input(request))
    return _session_response(output, "Payment session captured")


@router.post(
    "/cancel",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Cancel a payment",
    description="""
    Void the authorization, or refund the capture when there is one.

    Already voided or invoiced orders are returned unchanged.
    """,
)
async def cancel_payment(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Cancel a payment."""
    output = await provider.cancel_payment(_session_input(request))
    return _session_response(output, "Payment session canceled")


@router.post(
    "/refund",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Refund a captured payment",
)
async def refund_payment(
    request: RefundPaymentRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Refund part or all of a captured payment."""
    output = await provider.refund_payment(
        RefundPaymentInput(
            data=request.data, context=request.context, amount=request.amount
        )
    )
    return _session_response(output, "Payment session refunded")


@router.post(
    "/retrieve",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Fetch the latest PayPal order",
)
async def retrieve_payment(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Fetch the latest PayPal order."""
    output = await provider.retrieve_payment(_session_input(request))
    return _session_response(output, "Payment session retrieved")


@router.post(
    "/update",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Change the payment amount",
)
async def update_payment(
    request: UpdatePaymentRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Replace the order amount."""
    output = await provider.update_payment(
        UpdatePaymentInput(
            data=request.data,
            context=request.context,
            amount=request.amount,
            currency_code=request.currency_code,
        )
    )
    return _session_response(output, "Payment session updated")


@router.post(
    "/status",
    response_model=APIResponse[PaymentStatusResponse],
    summary="Get the reconciled payment status",
)
async def get_payment_status(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentStatusResponse]:
    """Reconcile the order status."""
    output = await provider.get_payment_status(_session_input(request))
    return _status_response(output, "Payment session status")


@router.post(
    "/delete",
    response_model=APIResponse[PaymentSessionResponse],
    summary="Release a payment session",
)
async def delete_payment(
    request: PaymentSessionRequest, provider: Provider
) -> APIResponse[PaymentSessionResponse]:
    """Release a payment session. Nothing is sent to PayPal."""
    output = await provider.delete_payment(_session_input(request))
    return _session_response(output, "Payment session deleted")
