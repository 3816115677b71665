"""Application configuration.

Uses pydantic-settings ``BaseSettings`` sub-configs grouped under a top-level
``AppConfig``.  Every value can be overridden with an env var carrying the
section's prefix (``GIFGRID_GIPHY_LIMIT=10``); otherwise field defaults apply.

Call ``reload_config()`` after changing the environment to rebuild the
in-memory singleton.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class EmptyTermPolicy(str, Enum):
    """What the query builder does with a blank search term."""

    DEFAULT = "default"  # search for ``default_query`` instead
    REJECT = "reject"    # issue no request; the UI alerts the user


class SearchProfile(str, Enum):
    SEARCH = "search"  # /v1/gifs/search with rating, lang and bundle
    TAGS = "tags"      # /v1/gifs/search/tags, term and paging only


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class GiphyConfig(BaseSettings):
    model_config = {"env_prefix": "GIFGRID_GIPHY_"}

    api_key: str = ""
    base_url: str = "https://api.giphy.com/v1/gifs"
    limit: int = Field(25, ge=1, le=50)
    rating: str = "g"
    lang: str = "en"
    bundle: str = "messaging_non_clips"
    default_query: str = "cats"
    empty_term_policy: EmptyTermPolicy = EmptyTermPolicy.DEFAULT
    profile: SearchProfile = SearchProfile.SEARCH
    timeout: float = 10.0  # seconds


class ServerIdentityConfig(BaseSettings):
    model_config = {"env_prefix": "GIFGRID_SERVER_"}

    title: str = "GIF Search"
    log_format: str = "json"  # "json" or "text"


# ---------------------------------------------------------------------------
# Top-level AppConfig
# ---------------------------------------------------------------------------

_SECTIONS: dict[str, type[BaseSettings]] = {
    "giphy": GiphyConfig,
    "server": ServerIdentityConfig,
}


class AppConfig(BaseModel):
    giphy: GiphyConfig = GiphyConfig()
    server: ServerIdentityConfig = ServerIdentityConfig()


# Module-level singleton
config = AppConfig()


def _reload_section(section_name: str) -> None:
    """Rebuild a single sub-config from env."""
    setattr(config, section_name, _SECTIONS[section_name]())


def reload_config() -> None:
    """Rebuild all sub-configs from env + defaults."""
    for section_name in _SECTIONS:
        _reload_section(section_name)
