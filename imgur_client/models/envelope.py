"""Generic Imgur response envelope.

Every Imgur v3 response is wrapped as ``{ status, success, data }`` where
``data`` is either the requested payload or an error object. The wire format
carries no tag for this; the variant is chosen by which shape ``data``
validates against, payload first.
"""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from imgur_client.errors import ImgurApiError

T = TypeVar("T")


class ApiError(BaseModel):
    """Error object the API places in ``data`` when a request fails."""

    model_config = ConfigDict(frozen=True)

    error: str
    request: str
    method: str


class Envelope(BaseModel, Generic[T]):
    """Decoded response envelope.

    ``status`` and ``success`` are informational only. Use ``into_result()``
    to find out whether the requested operation succeeded.
    """

    model_config = ConfigDict(frozen=True)

    status: NonNegativeInt
    success: bool
    data: Annotated[Union[T, ApiError], Field(union_mode="left_to_right")]

    @property
    def is_error(self) -> bool:
        return isinstance(self.data, ApiError)

    @property
    def payload(self) -> T | None:
        """The decoded payload, or None on the error variant."""
        if self.is_error:
            return None
        return self.data  # type: ignore[return-value]

    @property
    def error(self) -> ApiError | None:
        """The API error, or None on the success variant."""
        if self.is_error:
            return self.data  # type: ignore[return-value]
        return None

    def into_result(self) -> T:
        """Return the payload, or raise the API-reported failure.

        Raises
        ------
        ImgurApiError
            If ``data`` decoded as an ``ApiError``.
        """
        if isinstance(self.data, ApiError):
            raise ImgurApiError.from_api_error(self.data)
        return self.data
