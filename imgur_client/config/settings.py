"""Pydantic Settings for the Imgur client.

All environment variables use the IMGUR_ prefix.
Example: IMGUR_CLIENT_ID=0123456789abcde, IMGUR_TIMEOUT_SECONDS=5
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

API_BASE = "https://api.imgur.com/3"
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


class ImgurSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    client_id: str = Field(..., min_length=1)  # sent as "Client-ID <client_id>"
    api_base_url: str = API_BASE

    # Transport
    timeout_seconds: float = Field(default=10.0, gt=0)
    max_body_bytes: int = Field(default=DEFAULT_MAX_BODY_BYTES, ge=1)
    verify_tls: bool = True

    # Not read by the client; pass to configure_logging(settings.log_level)
    log_level: str = "INFO"

    model_config = {"env_prefix": "IMGUR_"}
