"""Exception handlers for the FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from paypal_payment.shared.core.logging import get_logger
from paypal_payment.shared.domain.exceptions import (
    ErrorKind,
    PaymentError,
    PaymentPreconditionError,
    PaymentProviderError,
    ProviderConfigurationError,
)
from paypal_payment.shared.presentation.api_response import APIResponse

log = get_logger(__name__)


def _error_response(status_code: int, exc: Exception, error: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse.error(str(exc), errors=[error]).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers."""

    @app.exception_handler(ProviderConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ProviderConfigurationError
    ) -> JSONResponse:
        log.error("provider_misconfigured", error=str(exc))
        return _error_response(500, exc, ErrorKind.CONFIGURATION.value)

    @app.exception_handler(PaymentPreconditionError)
    async def precondition_error_handler(
        request: Request, exc: PaymentPreconditionError
    ) -> JSONResponse:
        return _error_response(409, exc, ErrorKind.PRECONDITION.value)

    @app.exception_handler(PaymentProviderError)
    async def payment_provider_handler(
        request: Request, exc: PaymentProviderError
    ) -> JSONResponse:
        return _error_response(502, exc, ErrorKind.PROVIDER.value)

    @app.exception_handler(PaymentError)
    async def payment_error_handler(
        request: Request, exc: PaymentError
    ) -> JSONResponse:
        return _error_response(400, exc, exc.kind.value)

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        log.exception("unhandled_error", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content=APIResponse.error(
                "Internal server error", errors=[str(exc)]
            ).model_dump(),
        )
