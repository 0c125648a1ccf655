"""Image resource as returned by ``GET /image/{id}``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, NonNegativeInt, field_validator


class Image(BaseModel):
    """Imgur image record.

    Unknown keys are ignored. Fields the API omits or nulls depending on the
    image's state (anonymous upload, not in gallery, ...) are optional.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    link: str
    datetime: NonNegativeInt  # Unix epoch seconds
    animated: bool
    width: NonNegativeInt
    height: NonNegativeInt
    size: NonNegativeInt
    views: NonNegativeInt
    bandwidth: NonNegativeInt
    favorite: bool
    in_gallery: bool
    in_most_viral: bool
    is_ad: bool
    ad_type: NonNegativeInt
    ad_url: str
    tags: list[str]

    title: str | None = None
    description: str | None = None
    type: str | None = None  # MIME type
    account_id: str | None = None
    account_url: str | None = None
    nsfw: bool | None = None
    section: str | None = None
    vote: str | None = None
    deletehash: str | None = None  # only present for the uploader
    name: str | None = None
    gifv: str | None = None
    mp4: str | None = None
    mp4_size: NonNegativeInt | None = None
    looping: bool | None = None
    has_sound: bool | None = None
    edited: str | None = None

    @field_validator("account_id", mode="before")
    @classmethod
    def _account_id_as_str(cls, value: object) -> object:
        # The API sends numeric account ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
