import httpx
import pytest
from fastapi.testclient import TestClient

from feast_recipes.app.core.config import get_settings
from feast_recipes.app.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def mock_transport(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a ``MockTransport`` handler."""
    real_client = httpx.AsyncClient

    def install(handler):
        transport = httpx.MockTransport(handler)

        def client_factory(*args, **kwargs):
            kwargs["transport"] = transport
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)
        return transport

    return install


@pytest.fixture
def jsonld_page():
    """Build an HTML page embedding each argument as a JSON-LD script block."""

    def build(*blocks: str) -> str:
        scripts = "\n".join(
            f'<script type="application/ld+json">{block}</script>' for block in blocks
        )
        return f"<html><head>{scripts}</head><body><h1>Recipe</h1></body></html>"

    return build
