"""Decode raw response bodies into typed envelopes."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from imgur_client.errors import DecodeError
from imgur_client.models.envelope import Envelope


def decode_envelope(body: bytes, payload_type: Any) -> Envelope[Any]:
    """Parse ``body`` as an ``Envelope[payload_type]``.

    ``data`` is validated against ``payload_type`` first and against
    ``ApiError`` second; the first shape that matches wins. Validation is
    strict: JSON values must already have the declared type, so ``"800"``
    is not an int and ``0`` or ``"no"`` is not a bool.

    Raises
    ------
    DecodeError
        If the body is not valid JSON, any field has the wrong JSON type, or
        ``data`` matches neither shape.
    """
    try:
        return Envelope[payload_type].model_validate_json(body, strict=True)
    except ValidationError as exc:
        raise DecodeError(
            f"Invalid response body: {exc.error_count()} validation error(s)",
            cause=exc,
            body_bytes=len(body),
        ) from exc
