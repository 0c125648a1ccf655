"""Error hierarchy for the Imgur client.

Every failure a call can produce is an ``ImgurError`` subclass tagged with an
``ErrorKind``: transport failures, decode failures, errors reported by the
remote API, and client construction failures. Nothing in the client recovers
from these; they all propagate to the caller.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from imgur_client.models.envelope import ApiError


class ErrorKind(str, Enum):
    """Origin of an ``ImgurError``."""

    TRANSPORT = "transport"
    DECODE = "decode"
    API = "api"
    CONSTRUCTION = "construction"


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ImgurError(Exception):
    """Base error for all Imgur client errors."""

    kind: ErrorKind
    message: str = "Imgur client error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class TransportError(ImgurError):
    """The network/TLS layer failed, or the body could not be read."""

    kind = ErrorKind.TRANSPORT
    message = "Transport failure"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


class DecodeError(ImgurError):
    """The body was not valid JSON or matched neither expected shape."""

    kind = ErrorKind.DECODE
    message = "Could not decode response body"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause


class ImgurApiError(ImgurError):
    """The remote API reported failure for the requested operation."""

    kind = ErrorKind.API
    message = "Imgur API reported an error"

    def __init__(
        self,
        error: str,
        request: str,
        method: str,
        api_error: ApiError | None = None,
    ) -> None:
        self.error = error
        self.request = request
        self.method = method
        self.api_error = api_error
        super().__init__(
            f"Request {method} {request} failed: {error}",
            error=error,
            request=request,
            method=method,
        )

    @classmethod
    def from_api_error(cls, api_error: ApiError) -> ImgurApiError:
        return cls(api_error.error, api_error.request, api_error.method, api_error)


class ConstructionError(ImgurError):
    """The HTTP transport could not be initialized."""

    kind = ErrorKind.CONSTRUCTION
    message = "Could not initialize HTTP transport"

    def __init__(
        self,
        message: str | None = None,
        cause: BaseException | None = None,
        **kwargs: object,
    ) -> None:
        super().__init__(message, **kwargs)
        self.cause = cause
