"""Fetch a Giphy search URL and render the results into a display region."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

import httpx

from gifgrid.errors import DecodeError, GifFetchError, HTTPStatusError, TransportError
from gifgrid.models.gifs import ImageItem
from gifgrid.render import DisplayRegion, GridRenderer

log = logging.getLogger(__name__)


class RenderOutcome(str, Enum):
    RENDERED = "rendered"
    FAILED = "failed"
    DISCARDED = "discarded"  # a newer request was dispatched meanwhile


def extract_image_urls(payload: Any) -> list[str]:
    """Collect ``images.original.url`` from each result, skipping entries without one."""
    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise DecodeError("response has no 'data' array")
    urls: list[str] = []
    for item in payload["data"]:
        if not isinstance(item, dict):
            continue
        images = item.get("images")
        if not isinstance(images, dict):
            continue
        original = images.get("original")
        if not isinstance(original, dict):
            continue
        url = original.get("url")
        if isinstance(url, str) and url:
            urls.append(url)
    return urls


async def fetch_image_urls(client: httpx.AsyncClient, url: str, timeout: float = 10.0) -> list[str]:
    try:
        resp = await client.get(url, timeout=timeout, follow_redirects=True)
    except httpx.RequestError as exc:
        raise TransportError(str(exc) or type(exc).__name__) from exc
    if not resp.is_success:
        raise HTTPStatusError(resp.status_code)
    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError("response body is not valid JSON") from exc
    return extract_image_urls(payload)


class FetchAndRender:
    """One search button's worth of state: a display region and a request counter.

    With ``latest_wins`` set, a response only renders if no other request was
    dispatched through this pipeline after it; otherwise it is dropped.
    """

    def __init__(
        self,
        display: DisplayRegion,
        renderer: GridRenderer | None = None,
        client: httpx.AsyncClient | None = None,
        latest_wins: bool = True,
        timeout: float = 10.0,
    ) -> None:
        self.display = display
        self.renderer = renderer or GridRenderer()
        self.latest_wins = latest_wins
        self.timeout = timeout
        self._client = client
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    async def _fetch(self, url: str) -> list[str]:
        if self._client is not None:
            return await fetch_image_urls(self._client, url, timeout=self.timeout)
        async with httpx.AsyncClient() as client:
            return await fetch_image_urls(client, url, timeout=self.timeout)

    def _is_stale(self, generation: int) -> bool:
        return self.latest_wins and generation != self._generation

    async def run(self, url: str) -> RenderOutcome:
        self._generation += 1
        generation = self._generation
        try:
            urls = await self._fetch(url)
        except GifFetchError:
            if self._is_stale(generation):
                log.debug("Dropping failed GIF search %d; a newer search is pending", generation)
                return RenderOutcome.DISCARDED
            log.exception("Error fetching GIFs")
            self.renderer.render_error(self.display)
            return RenderOutcome.FAILED

        if self._is_stale(generation):
            log.debug("Dropping GIF search %d; a newer search is pending", generation)
            return RenderOutcome.DISCARDED
        log.info("Fetched image URLs: %s", urls)
        self.renderer.render_images(self.display, [ImageItem(url=u) for u in urls])
        return RenderOutcome.RENDERED
