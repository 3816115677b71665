"""Response models for GIF search endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ImageItem(BaseModel):
    url: str
    alt: str = "GIF"


class GifSearchResponse(BaseModel):
    images: list[ImageItem]
