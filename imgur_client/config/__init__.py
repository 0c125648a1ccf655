"""Configuration module."""

from imgur_client.config.settings import API_BASE, DEFAULT_MAX_BODY_BYTES, ImgurSettings

__all__ = [
    "API_BASE",
    "DEFAULT_MAX_BODY_BYTES",
    "ImgurSettings",
]
