"""FastAPI Application for the PayPal payment provider."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paypal_payment.features.payments.infrastructure.provider_factory import (
    get_payment_provider,
)
from paypal_payment.features.payments.presentation.router import (
    router as payments_router,
)
from paypal_payment.features.webhooks.presentation.router import (
    router as webhooks_router,
)
from paypal_payment.shared.core.logging import configure_logging, get_logger
from paypal_payment.shared.core.settings import get_settings
from paypal_payment.shared.presentation.exception_handlers import (
    register_exception_handlers,
)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings = get_settings()
    log.info(
        "service_starting",
        host=settings.host,
        port=settings.port,
        paypal_environment=settings.paypal_environment,
    )

    yield

    # Only close a provider that was actually built
    if get_payment_provider.cache_info().currsize:
        await get_payment_provider().aclose()
        get_payment_provider.cache_clear()
    log.info("service_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title="PayPal Payment Provider",
        description="PayPal Orders adapter for the payment session lifecycle",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(
        payments_router, prefix="/api/payments/sessions", tags=["Payment sessions"]
    )
    app.include_router(webhooks_router, prefix="/api/webhooks", tags=["Webhooks"])

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": "paypal-payment",
            "environment": settings.paypal_environment or "unconfigured",
        }

    return app


app = create_app()
