from .exceptions import (
    AppException,
    BadRequestError,
    ConfigurationError,
    ServiceUnavailableError,
    UpstreamError,
)

__all__ = [
    "AppException",
    "BadRequestError",
    "ConfigurationError",
    "ServiceUnavailableError",
    "UpstreamError",
]
