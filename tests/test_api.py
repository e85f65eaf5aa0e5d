"""REST API endpoint tests."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from status_snake.config import GameConfig
from status_snake.server.app import create_app
from status_snake.server.session import SessionManager

BASE = "http://test"


@pytest.fixture()
def app():
    config = GameConfig(width=24, height=18, hard_border=True)
    application = create_app(config)
    application.state.session_manager = SessionManager(config)
    return application


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE) as c:
        yield c


class TestConfigEndpoint:
    @pytest.mark.asyncio
    async def test_get_config(self, client):
        resp = await client.get("/config")
        assert resp.status_code == 200
        data = resp.json()
        assert data["width"] == 24
        assert data["height"] == 18
        assert data["hard_border"] is True
        assert data["initial_length"] == 3
        assert "seed" not in data

    def test_default_config(self):
        assert create_app().state.config == GameConfig()


class TestLabelEndpoints:
    @pytest.mark.asyncio
    async def test_list_labels(self, client):
        resp = await client.get("/labels")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 62
        assert data[0] == {"index": 0, "code": 100, "message": "Continue"}
        assert data[-1]["code"] == 511

    @pytest.mark.asyncio
    async def test_get_label(self, client):
        resp = await client.get("/labels/27")
        assert resp.status_code == 200
        assert resp.json() == {"index": 27, "code": 404, "message": "Not Found"}

    @pytest.mark.asyncio
    async def test_label_wraps(self, client):
        resp = await client.get("/labels/62")
        assert resp.status_code == 200
        assert resp.json()["code"] == 100

    @pytest.mark.asyncio
    async def test_negative_index_rejected(self, client):
        resp = await client.get("/labels/-1")
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_non_numeric_index_rejected(self, client):
        resp = await client.get("/labels/teapot")
        assert resp.status_code == 422
