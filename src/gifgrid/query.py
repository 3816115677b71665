"""Turn a raw search box value into a Giphy search URL."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from gifgrid.config import EmptyTermPolicy, GiphyConfig, SearchProfile
from gifgrid.errors import UserInputError

# Characters a browser's encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_term(term: str) -> str:
    return quote(term, safe=_URI_COMPONENT_SAFE)


@dataclass(frozen=True)
class SearchRequest:
    """Everything that determines one search URL."""

    term: str
    api_key: str
    base_url: str
    limit: int
    rating: str
    lang: str
    bundle: str
    profile: SearchProfile = SearchProfile.SEARCH

    @property
    def params(self) -> list[tuple[str, str | int]]:
        params: list[tuple[str, str | int]] = [
            ("api_key", self.api_key),
            ("q", self.term),
            ("limit", self.limit),
            ("offset", 0),
        ]
        if self.profile is SearchProfile.SEARCH:
            params += [("rating", self.rating), ("lang", self.lang), ("bundle", self.bundle)]
        return params

    @property
    def url(self) -> str:
        path = "search/tags" if self.profile is SearchProfile.TAGS else "search"
        query = "&".join(f"{key}={encode_term(str(value))}" for key, value in self.params)
        return f"{self.base_url}/{path}?{query}"


class QueryBuilder:
    def __init__(self, settings: GiphyConfig) -> None:
        self.settings = settings

    def request_for(self, raw: str) -> SearchRequest | None:
        """Return the request for ``raw``, or None when no request should be made."""
        term = raw.strip()
        if not term:
            if self.settings.empty_term_policy is EmptyTermPolicy.REJECT:
                return None
            term = self.settings.default_query
        s = self.settings
        return SearchRequest(
            term=term,
            api_key=s.api_key,
            base_url=s.base_url.rstrip("/"),
            limit=s.limit,
            rating=s.rating,
            lang=s.lang,
            bundle=s.bundle,
            profile=s.profile,
        )

    def build(self, raw: str) -> str | None:
        request = self.request_for(raw)
        return request.url if request is not None else None

    def require(self, raw: str) -> str:
        """Like ``build`` but raise ``UserInputError`` instead of returning None."""
        url = self.build(raw)
        if url is None:
            raise UserInputError("Please enter a search term.")
        return url
