"""
HTTP-shaped responses returned by the use-case routers.

A response carries either a success payload (``data`` with a 2xx status)
or an error payload (``error`` and/or ``message`` with a 4xx/5xx status),
never both. ``to_body`` renders the JSON body sent to clients.
"""

from dataclasses import dataclass
from typing import Any, Optional

HTTP_200 = 200
HTTP_201 = 201
HTTP_400 = 400
HTTP_500 = 500

UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


@dataclass(frozen=True)
class HttpBaseResponse:
    status: int
    data: Optional[Any] = None
    error: Optional[Exception] = None
    message: Optional[str] = None

    def to_body(self) -> dict[str, Any]:
        """Return the JSON-serializable body, omitting unset fields."""
        body: dict[str, Any] = {"status": self.status}
        if self.data is not None:
            body["data"] = self.data
        if self.error is not None:
            body["error"] = {"name": type(self.error).__name__, "message": str(self.error)}
        if self.message is not None:
            body["message"] = self.message
        return body


class HttpResponse:
    """Factory helpers for the response shapes the routers emit."""

    @staticmethod
    def ok(data: Any) -> HttpBaseResponse:
        return HttpBaseResponse(status=HTTP_200, data=data)

    @staticmethod
    def created(data: Any) -> HttpBaseResponse:
        return HttpBaseResponse(status=HTTP_201, data=data)

    @staticmethod
    def bad_request(error: Exception) -> HttpBaseResponse:
        return HttpBaseResponse(status=HTTP_400, error=error, message=str(error))

    @staticmethod
    def server_error() -> HttpBaseResponse:
        return HttpBaseResponse(status=HTTP_500, message=UNEXPECTED_ERROR_MESSAGE)
