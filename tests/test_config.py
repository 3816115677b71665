import pytest
from pydantic import ValidationError

import gifgrid.config as _cfg
from gifgrid.config import EmptyTermPolicy, GiphyConfig, SearchProfile


def test_defaults():
    g = GiphyConfig(api_key="k")
    assert g.limit == 25
    assert g.rating == "g"
    assert g.lang == "en"
    assert g.bundle == "messaging_non_clips"
    assert g.default_query == "cats"
    assert g.empty_term_policy is EmptyTermPolicy.DEFAULT
    assert g.profile is SearchProfile.SEARCH


def test_env_overrides_after_reload(monkeypatch):
    monkeypatch.setenv("GIFGRID_GIPHY_LIMIT", "12")
    monkeypatch.setenv("GIFGRID_GIPHY_PROFILE", "tags")
    monkeypatch.setenv("GIFGRID_SERVER_LOG_FORMAT", "text")
    _cfg.reload_config()
    assert _cfg.config.giphy.limit == 12
    assert _cfg.config.giphy.profile is SearchProfile.TAGS
    assert _cfg.config.giphy.api_key == "test-key"
    assert _cfg.config.server.log_format == "text"


def test_limit_bounds():
    with pytest.raises(ValidationError):
        GiphyConfig(limit=0)
