"""Async client for the Imgur v3 API (images and albums).

Each resource method issues exactly one authenticated GET request, buffers the
JSON body and decodes it into a typed ``Envelope``. No retries, caching or
rate limiting are applied.

SECURITY: The client id is sent in the Authorization header only and is never
logged.
"""

from __future__ import annotations

import logging
import time
from typing import Any
from urllib.parse import quote

import httpx

from imgur_client.config.settings import API_BASE, DEFAULT_MAX_BODY_BYTES, ImgurSettings
from imgur_client.decoder import decode_envelope
from imgur_client.errors import ConstructionError, DecodeError, TransportError
from imgur_client.models.album import Album
from imgur_client.models.envelope import Envelope
from imgur_client.models.image import Image

logger = logging.getLogger(__name__)


class ImgurClient:
    """Typed client for the Imgur image and album endpoints.

    Build one with ``create()`` (the client owns its transport) or
    ``with_transport()`` (the caller owns it). The client keeps no per-call
    state, so a single instance can serve concurrent calls.

    Parameters
    ----------
    http_client:
        Transport used for every request.
    client_id:
        Imgur application client id.
    base_url:
        API base URL (default ``https://api.imgur.com/3``).
    max_body_bytes:
        Largest response body that will be buffered before decoding.
    owns_transport:
        Whether ``aclose()`` closes ``http_client``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        client_id: str,
        base_url: str = API_BASE,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
        owns_transport: bool = False,
    ) -> None:
        self._http = http_client
        self._client_id = client_id
        self._base_url = base_url.rstrip("/")
        self._max_body_bytes = max_body_bytes
        self._owns_transport = owns_transport
        self._headers = {
            "Authorization": f"Client-ID {client_id}",
            "Accept": "application/json",
        }

    @classmethod
    def create(
        cls,
        client_id: str,
        *,
        base_url: str = API_BASE,
        timeout_seconds: float = 10.0,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
        verify: bool = True,
    ) -> ImgurClient:
        """Build a client together with its own HTTPS transport.

        Raises
        ------
        ConstructionError
            If the transport or its TLS context cannot be initialized.
        """
        try:
            http_client = httpx.AsyncClient(timeout=timeout_seconds, verify=verify)
        except (OSError, ValueError) as exc:
            raise ConstructionError(
                f"Could not initialize HTTP transport: {exc}", cause=exc
            ) from exc
        return cls(
            http_client,
            client_id,
            base_url=base_url,
            max_body_bytes=max_body_bytes,
            owns_transport=True,
        )

    @classmethod
    def with_transport(
        cls,
        http_client: httpx.AsyncClient,
        client_id: str,
        *,
        base_url: str = API_BASE,
        max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
    ) -> ImgurClient:
        """Wrap a transport the caller already configured. Never fails."""
        return cls(
            http_client,
            client_id,
            base_url=base_url,
            max_body_bytes=max_body_bytes,
        )

    @classmethod
    def from_settings(cls, settings: ImgurSettings) -> ImgurClient:
        return cls.create(
            settings.client_id,
            base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
            max_body_bytes=settings.max_body_bytes,
            verify=settings.verify_tls,
        )

    @property
    def client_id(self) -> str:
        return self._client_id

    async def aclose(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            await self._http.aclose()

    async def __aenter__(self) -> ImgurClient:
        return self

    async def __aexit__(self, exc_type: object, exc: object, tb: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    async def image(self, image_id: str) -> Envelope[Image]:
        """GET /image/{id}."""
        return await self._request(self._url("image", image_id), Image)

    async def album(self, album_id: str) -> Envelope[Album]:
        """GET /album/{id}."""
        return await self._request(self._url("album", album_id), Album)

    async def album_images(self, album_id: str) -> Envelope[list[Image]]:
        """GET /album/{id}/images."""
        return await self._request(
            self._url("album", album_id, "images"), list[Image]
        )

    # ------------------------------------------------------------------
    # Request/decode pipeline
    # ------------------------------------------------------------------

    def _url(self, resource: str, resource_id: str, *suffix: str) -> str:
        parts = [resource, quote(resource_id, safe=""), *suffix]
        return f"{self._base_url}/{'/'.join(parts)}"

    async def _request(self, url: str, payload_type: Any) -> Envelope[Any]:
        """Send a GET, buffer the body and decode it as ``Envelope[payload_type]``.

        Raises
        ------
        TransportError
            If the request or the body read fails, or the body is too large.
        DecodeError
            If the body cannot be decoded into the expected envelope.
        """
        started = time.monotonic()
        logger.debug("GET %s", url, extra={"url": url})

        try:
            async with self._http.stream("GET", url, headers=self._headers) as response:
                body = await self._read_body(response, url)
        except httpx.HTTPError as exc:
            logger.warning(
                "GET %s failed: %s",
                url,
                exc,
                extra={"url": url, "error_kind": TransportError.kind.value},
            )
            raise TransportError(f"GET {url} failed: {exc}", cause=exc, url=url) from exc

        duration_ms = (time.monotonic() - started) * 1000
        logger.debug(
            "GET %s returned %d (%d bytes, %.1f ms)",
            url,
            response.status_code,
            len(body),
            duration_ms,
            extra={
                "url": url,
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 1),
            },
        )

        try:
            return decode_envelope(body, payload_type)
        except DecodeError:
            logger.warning(
                "Could not decode response from GET %s (status %d)",
                url,
                response.status_code,
                extra={
                    "url": url,
                    "status_code": response.status_code,
                    "error_kind": DecodeError.kind.value,
                },
            )
            raise

    async def _read_body(self, response: httpx.Response, url: str) -> bytes:
        """Accumulate the full body, enforcing ``max_body_bytes``."""
        chunks: list[bytes] = []
        total = 0
        async for chunk in response.aiter_bytes():
            total += len(chunk)
            if total > self._max_body_bytes:
                raise TransportError(
                    f"Response body from {url} exceeds {self._max_body_bytes} bytes",
                    url=url,
                    max_body_bytes=self._max_body_bytes,
                )
            chunks.append(chunk)
        return b"".join(chunks)
