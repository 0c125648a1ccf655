"""Shared test fixtures for the Imgur client test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from imgur_client.client import ImgurClient
from imgur_client.config.settings import ImgurSettings

TEST_CLIENT_ID = "test-client-id"


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> ImgurSettings:
    """Test settings with safe defaults."""
    return ImgurSettings(client_id=TEST_CLIENT_ID, timeout_seconds=1.0)


# ---------------------------------------------------------------------------
# Payload fixtures
# ---------------------------------------------------------------------------

def _image_data(image_id: str = "PE2NI", **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": image_id,
        "title": None,
        "description": None,
        "datetime": 1349051625,
        "type": "image/jpeg",
        "animated": False,
        "width": 800,
        "height": 600,
        "size": 94851,
        "views": 12345,
        "bandwidth": 1171064895,
        "vote": None,
        "favorite": False,
        "nsfw": None,
        "section": None,
        "account_url": None,
        "account_id": None,
        "is_ad": False,
        "in_most_viral": False,
        "has_sound": False,
        "tags": [],
        "ad_type": 0,
        "ad_url": "",
        "edited": "0",
        "in_gallery": False,
        "link": f"https://i.imgur.com/{image_id}.jpg",
    }
    data.update(overrides)
    return data


def _album_data(album_id: str = "cXz3n", **overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": album_id,
        "title": "Holiday",
        "description": None,
        "datetime": 1349051610,
        "cover": "PE2NI",
        "cover_width": 800,
        "cover_height": 600,
        "account_url": None,
        "account_id": None,
        "privacy": "public",
        "layout": "blog",
        "views": 4321,
        "link": f"https://imgur.com/a/{album_id}",
        "favorite": False,
        "nsfw": False,
        "section": None,
        "images_count": 6,
        "in_gallery": False,
        "is_ad": False,
        "include_album_ads": False,
        "images": None,
    }
    data.update(overrides)
    return data


@pytest.fixture
def make_image_data() -> Callable[..., dict[str, Any]]:
    return _image_data


@pytest.fixture
def make_album_data() -> Callable[..., dict[str, Any]]:
    return _album_data


@pytest.fixture
def make_body() -> Callable[..., bytes]:
    """Serialize an envelope body: make_body(data, status=200, success=True)."""

    def _make(data: Any, status: int = 200, success: bool = True) -> bytes:
        return json.dumps({"data": data, "success": success, "status": status}).encode()

    return _make


# ---------------------------------------------------------------------------
# Client over a stub transport
# ---------------------------------------------------------------------------

@pytest.fixture
def make_client() -> Callable[..., ImgurClient]:
    """Build an ImgurClient whose requests are answered by ``handler``."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
        **kwargs: Any,
    ) -> ImgurClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ImgurClient.with_transport(http_client, TEST_CLIENT_ID, **kwargs)

    return _make
