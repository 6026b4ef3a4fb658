"""API Gateway request helpers"""
from src.presentation.api.request import (
    current_timestamp,
    extract_bearer_token,
    extract_request_context,
    generate_correlation_id,
    get_header,
    get_request_body,
)

__all__ = [
    "current_timestamp",
    "extract_bearer_token",
    "extract_request_context",
    "generate_correlation_id",
    "get_header",
    "get_request_body",
]
