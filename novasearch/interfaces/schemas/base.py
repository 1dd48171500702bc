from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """Envelope shared by every API response; ``code`` mirrors the HTTP status."""

    code: int = 200
    msg: str = "success"
    data: Optional[T] = None

    @staticmethod
    def success(data: Optional[T] = None, msg: str = "success") -> "Response[T]":
        return Response[T](code=200, msg=msg, data=data)

    @staticmethod
    def fail(
        code: int = 400, msg: str = "fail", data: Optional[Any] = None
    ) -> "Response[Any]":
        """Build a failure envelope; ``data`` may carry error details."""
        return Response[Any](code=code, msg=msg, data=data)
