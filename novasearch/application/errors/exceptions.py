from typing import Any


class AppException(RuntimeError):
    """Base application exception."""

    def __init__(
        self,
        code: int = 400,
        status_code: int = 400,
        msg: str = "Application error",
        data: Any = None,
    ):
        self.code = code
        self.status_code = status_code
        self.msg = msg
        self.data = data
        super().__init__(msg)


class BadRequestError(AppException):
    """The client sent an invalid request."""

    def __init__(self, msg: str = "Bad request"):
        super().__init__(code=400, status_code=400, msg=msg)


class ConfigurationError(AppException):
    """A required upstream credential or setting is missing.

    Fatal for the whole search: surfaced to the caller, never cached.
    """

    def __init__(self, msg: str = "Search provider is not configured"):
        super().__init__(code=500, status_code=500, msg=msg)


class UpstreamError(AppException):
    """A single upstream call failed (network or HTTP error)."""

    def __init__(self, msg: str = "Upstream request failed", data: Any = None):
        super().__init__(code=502, status_code=502, msg=msg, data=data)


class ServiceUnavailableError(AppException):
    """A backing service is unavailable."""

    def __init__(self, msg: str = "Service temporarily unavailable"):
        super().__init__(code=503, status_code=503, msg=msg)
