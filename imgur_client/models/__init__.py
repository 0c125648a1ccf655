"""Public models for the Imgur client."""

from imgur_client.models.album import Album
from imgur_client.models.envelope import ApiError, Envelope
from imgur_client.models.image import Image

__all__ = [
    "Album",
    "ApiError",
    "Envelope",
    "Image",
]
