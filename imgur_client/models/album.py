"""Album resource as returned by ``GET /album/{id}``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator

from imgur_client.models.image import Image


class Album(BaseModel):
    """Imgur album record.

    ``images`` is only populated when the API inlines the album's images;
    ``null`` and a missing key both decode to None.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    link: str
    datetime: NonNegativeInt
    views: NonNegativeInt
    images_count: NonNegativeInt
    favorite: bool
    in_gallery: bool
    is_ad: bool

    title: str | None = None
    description: str | None = None
    cover: str | None = None
    cover_width: NonNegativeInt | None = None
    cover_height: NonNegativeInt | None = None
    account_id: str | None = None
    account_url: str | None = None
    privacy: str | None = None
    layout: str | None = None
    nsfw: bool | None = None
    section: str | None = None
    order: int | None = None
    deletehash: str | None = None
    include_album_ads: bool | None = None
    images: list[Image] | None = None

    @field_validator("account_id", mode="before")
    @classmethod
    def _account_id_as_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
