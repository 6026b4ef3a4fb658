"""Gateway domain types"""
from src.domain.proxy.errors import ApiError, ConfigurationError
from src.domain.proxy.value_objects import LogContext, RequestContext, TokenValidationResult

__all__ = [
    "ApiError",
    "ConfigurationError",
    "LogContext",
    "RequestContext",
    "TokenValidationResult",
]
