"""Lambda middleware: CORS, error handling, structured logging"""
from src.presentation.middleware.cors import add_cors_headers, handle_preflight
from src.presentation.middleware.error_handler import (
    handle_authorization_error,
    handle_not_found_error,
    handle_validation_error,
    with_error_handler,
)
from src.presentation.middleware.logging import configure_logging

__all__ = [
    "add_cors_headers",
    "configure_logging",
    "handle_authorization_error",
    "handle_not_found_error",
    "handle_preflight",
    "handle_validation_error",
    "with_error_handler",
]
