import httpx
import pytest

from dinner.api import api_extract
from dinner.api.api_run import app
from dinner.infra import paths


def _use_webhook(monkeypatch, handler):
    monkeypatch.setattr(api_extract, "WEBHOOK_URL", "http://extractor.test/hook")
    monkeypatch.setattr(
        api_extract, "_make_client",
        lambda: httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def _client():
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def uploaded(tmp_path, monkeypatch):
    """A stored image under a temporary uploads directory."""
    monkeypatch.setattr(paths, "UPLOADS_DIR", tmp_path)
    (tmp_path / "images").mkdir()
    (tmp_path / "images" / "card-1.png").write_bytes(b"png-bytes")
    return "data/uploads/images/card-1.png"


@pytest.mark.asyncio
async def test_extract_relays_file(uploaded, monkeypatch):
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = request.read()
        return httpx.Response(200, json={"name": "Card Recipe", "ingredients": []})

    _use_webhook(monkeypatch, handler)
    async with _client() as ac:
        resp = await ac.post("/api/extract", json={"path": uploaded})
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Card Recipe"
    assert seen["url"] == "http://extractor.test/hook"
    assert b"png-bytes" in seen["body"]


@pytest.mark.asyncio
async def test_extract_passes_upstream_errors(uploaded, monkeypatch):
    _use_webhook(monkeypatch, lambda request: httpx.Response(422, text="unreadable image"))
    async with _client() as ac:
        resp = await ac.post("/api/extract", json={"path": uploaded})
    assert resp.status_code == 422
    assert resp.json() == {"error": "unreadable image"}


@pytest.mark.asyncio
async def test_extract_unreachable_service(uploaded, monkeypatch):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    _use_webhook(monkeypatch, handler)
    async with _client() as ac:
        resp = await ac.post("/api/extract", json={"path": uploaded})
    assert resp.status_code == 502


@pytest.mark.asyncio
async def test_extract_rejects_paths_outside_uploads(uploaded, monkeypatch):
    _use_webhook(monkeypatch, lambda request: httpx.Response(200, json={}))
    async with _client() as ac:
        outside = await ac.post("/api/extract", json={"path": "data/master_recipes.json"})
        escaping = await ac.post("/api/extract", json={"path": "data/uploads/../master_recipes.json"})
        missing = await ac.post("/api/extract", json={"path": "data/uploads/images/nope.png"})
    assert outside.status_code == 400
    assert escaping.status_code == 400
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_extract_not_configured(uploaded, monkeypatch):
    monkeypatch.setattr(api_extract, "WEBHOOK_URL", "")
    async with _client() as ac:
        resp = await ac.post("/api/extract", json={"path": uploaded})
    assert resp.status_code == 503
