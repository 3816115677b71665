"""Display region and the markup templates that fill it."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from html import escape

from gifgrid.models.gifs import ImageItem

ERROR_MESSAGE = "Failed to fetch GIFs. Check the console for details."

_IMAGE_TEMPLATE = (
    '<div class="col-6 col-md-3">'
    '<img src="{src}" class="img-fluid" alt="{alt}">'
    "</div>"
)
_ERROR_TEMPLATE = (
    '<div class="col-12">'
    '<div class="alert alert-danger" role="alert">{message}</div>'
    "</div>"
)


@dataclass(frozen=True)
class Fragment:
    kind: str  # "image" or "error"
    html: str
    src: str | None = None


@dataclass
class DisplayRegion:
    """The grid container a search writes into."""

    element_id: str = "gif-container"
    fragments: list[Fragment] = field(default_factory=list)

    def clear(self) -> None:
        self.fragments.clear()

    def append(self, fragment: Fragment) -> None:
        self.fragments.append(fragment)

    @property
    def images(self) -> list[Fragment]:
        return [f for f in self.fragments if f.kind == "image"]

    @property
    def errors(self) -> list[Fragment]:
        return [f for f in self.fragments if f.kind == "error"]

    @property
    def image_sources(self) -> list[str]:
        return [f.src for f in self.images if f.src is not None]

    @property
    def inner_html(self) -> str:
        return "".join(f.html for f in self.fragments)

    def to_html(self) -> str:
        return f'<div id="{escape(self.element_id)}" class="row g-3">{self.inner_html}</div>'


class GridRenderer:
    """Builds grid fragments from image items and writes them to a region."""

    def image(self, item: ImageItem) -> Fragment:
        html = _IMAGE_TEMPLATE.format(src=escape(item.url), alt=escape(item.alt))
        return Fragment(kind="image", html=html, src=item.url)

    def error(self, message: str = ERROR_MESSAGE) -> Fragment:
        return Fragment(kind="error", html=_ERROR_TEMPLATE.format(message=escape(message)))

    def render_images(self, region: DisplayRegion, items: list[ImageItem]) -> None:
        fragments = [self.image(item) for item in items]
        region.clear()
        for fragment in fragments:
            region.append(fragment)

    def render_error(self, region: DisplayRegion, message: str = ERROR_MESSAGE) -> None:
        fragment = self.error(message)
        region.clear()
        region.append(fragment)


_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css">
</head>
<body>
<main class="container py-4">
<h1 class="mb-4">{title}</h1>
<form class="input-group mb-4" method="get" action="/">
<input id="search-input" name="q" type="text" class="form-control" placeholder="Search GIFs" value="{term}">
<button id="fetch-gif-btn" class="btn btn-primary" type="submit">Fetch GIFs</button>
</form>
{grid}
</main>
{alert}
</body>
</html>
"""


def render_page(title: str, region: DisplayRegion, term: str = "", alert: str | None = None) -> str:
    """Full search page: input, button and the display region."""
    script = ""
    if alert:
        literal = json.dumps(alert).replace("</", "<\\/")
        script = f"<script>alert({literal});</script>"
    return _PAGE_TEMPLATE.format(
        title=escape(title),
        term=escape(term),
        grid=region.to_html(),
        alert=script,
    )
