"""Typed async client for the Imgur v3 image and album API."""

from imgur_client.client import ImgurClient
from imgur_client.config import API_BASE, ImgurSettings
from imgur_client.decoder import decode_envelope
from imgur_client.errors import (
    ConstructionError,
    DecodeError,
    ErrorKind,
    ImgurApiError,
    ImgurError,
    TransportError,
)
from imgur_client.models import Album, ApiError, Envelope, Image

__all__ = [
    "API_BASE",
    "Album",
    "ApiError",
    "ConstructionError",
    "DecodeError",
    "Envelope",
    "ErrorKind",
    "Image",
    "ImgurApiError",
    "ImgurClient",
    "ImgurError",
    "ImgurSettings",
    "TransportError",
    "decode_envelope",
]
