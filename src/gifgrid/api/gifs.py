"""GIF search page, grid fragment and JSON search endpoints."""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from gifgrid.config import config
from gifgrid.errors import GifFetchError, UserInputError
from gifgrid.models.gifs import GifSearchResponse, ImageItem
from gifgrid.pipeline import FetchAndRender, fetch_image_urls
from gifgrid.query import QueryBuilder
from gifgrid.render import DisplayRegion, render_page

router = APIRouter(tags=["gifs"])
log = logging.getLogger(__name__)


def _builder() -> QueryBuilder:
    return QueryBuilder(config.giphy)


def _require_api_key() -> str:
    key = config.giphy.api_key
    if not key:
        raise HTTPException(
            status_code=503,
            detail={"error": {"code": "GIF_PROVIDER_UNAVAILABLE", "message": "GIF provider is not configured."}},
        )
    return key


async def _render_grid(url: str) -> DisplayRegion:
    if not config.giphy.api_key:
        log.warning("Giphy API key is not configured; search will be sent without one")
    region = DisplayRegion()
    await FetchAndRender(region, timeout=config.giphy.timeout).run(url)
    return region


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def search_page(q: str | None = None) -> HTMLResponse:
    title = config.server.title
    if q is None:
        return HTMLResponse(render_page(title, DisplayRegion()))
    try:
        url = _builder().require(q)
    except UserInputError as exc:
        return HTMLResponse(render_page(title, DisplayRegion(), term=q, alert=str(exc)))
    region = await _render_grid(url)
    return HTMLResponse(render_page(title, region, term=q))


@router.get("/grid", response_class=HTMLResponse)
async def grid_fragment(q: str = "") -> HTMLResponse:
    url = _builder().require(q)
    region = await _render_grid(url)
    return HTMLResponse(region.to_html())


@router.get("/api/v1/gifs/search")
async def gif_search(q: str = Query("")) -> GifSearchResponse:
    _require_api_key()
    url = _builder().require(q)
    try:
        async with httpx.AsyncClient() as client:
            urls = await fetch_image_urls(client, url, timeout=config.giphy.timeout)
    except GifFetchError:
        log.exception("GIF search upstream error")
        raise HTTPException(
            status_code=502,
            detail={"error": {"code": "GIF_UPSTREAM_ERROR", "message": "Failed to fetch GIFs from provider."}},
        )
    return GifSearchResponse(images=[ImageItem(url=u) for u in urls])
