import pytest
from httpx import ASGITransport, AsyncClient

from gifgrid.api.app import create_app


def _reset_config():
    """Reset the in-memory config singleton to env + defaults."""
    import gifgrid.config as _cfg
    _cfg.reload_config()


@pytest.fixture()
def app():
    return create_app()


@pytest.fixture(autouse=True)
def _clear_state(monkeypatch):
    for name in ("API_KEY", "LIMIT", "EMPTY_TERM_POLICY", "PROFILE", "DEFAULT_QUERY"):
        monkeypatch.delenv(f"GIFGRID_GIPHY_{name}", raising=False)
    monkeypatch.setenv("GIFGRID_GIPHY_API_KEY", "test-key")
    _reset_config()
    yield
    monkeypatch.undo()
    _reset_config()


@pytest.fixture()
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as c:
        yield c
