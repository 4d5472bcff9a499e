"""Shared presentation module."""

from paypal_payment.shared.presentation.exception_handlers import register_exception_handlers
from paypal_payment.shared.presentation.api_response import APIResponse

__all__ = ["register_exception_handlers", "APIResponse"]
