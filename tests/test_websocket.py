"""WebSocket integration tests for real-time gameplay."""

from __future__ import annotations

import json

import pytest
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from status_snake.config import GameConfig
from status_snake.controller import InputEvent
from status_snake.server.app import create_app
from status_snake.server.models import InputMessage
from status_snake.server.session import SessionManager


@pytest.fixture()
def manager():
    return SessionManager(GameConfig(seed=1))


@pytest.fixture()
def tc(manager):
    """Starlette sync TestClient sharing one event loop for every socket."""
    application = create_app(manager.config)
    application.state.session_manager = manager
    return TestClient(application)


def _receive_until(ws, event: str, limit: int = 20) -> dict:
    """Read messages until one with the given event name arrives."""
    for _ in range(limit):
        msg = json.loads(ws.receive_text())
        if msg["event"] == event:
            return msg
    raise AssertionError(f"no {event!r} message within {limit} messages")


class TestInputMessage:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ({"type": "direction", "direction": "up"}, InputEvent.UP),
            ({"type": "direction", "direction": "LEFT"}, InputEvent.LEFT),
            ({"type": "direction"}, None),
            ({"type": "pause"}, InputEvent.PAUSE),
            ({"type": "new_game"}, InputEvent.NEW_GAME),
        ],
    )
    def test_to_event(self, raw, expected):
        assert InputMessage.model_validate(raw).to_event() is expected

    @pytest.mark.parametrize(
        "raw",
        [
            {"type": "jump"},
            {"type": "direction", "direction": "sideways"},
            {"direction": "up"},
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            InputMessage.model_validate(raw)


class TestPlayWebSocket:
    def test_initial_messages(self, tc):
        with tc.websocket_connect("/play") as ws:
            first = json.loads(ws.receive_text())
            second = json.loads(ws.receive_text())
            third = json.loads(ws.receive_text())
        assert first == {
            "event": "draw_score", "score": 0, "code": 100, "message": "Continue",
        }
        assert second["event"] == "draw_target"
        assert third["event"] == "draw_snake"
        assert third["positions"] == [[9, 9, 0], [9, 10, 0], [9, 11, 0]]

    def test_receives_ticks(self, tc):
        with tc.websocket_connect("/play") as ws:
            msg = _receive_until(ws, "update_snake")
        assert len(msg["positions"]) == 3
        assert msg["positions"][0][:2] == [9, 8]

    def test_direction_echoed(self, tc):
        with tc.websocket_connect("/play") as ws:
            _receive_until(ws, "draw_snake")
            ws.send_text(json.dumps({"type": "direction", "direction": "right"}))
            msg = _receive_until(ws, "change_snake_direction")
        assert msg["direction"] == 1

    def test_pause_and_resume(self, tc):
        with tc.websocket_connect("/play") as ws:
            _receive_until(ws, "draw_snake")
            ws.send_text(json.dumps({"type": "pause"}))
            _receive_until(ws, "set_paused")
            ws.send_text(json.dumps({"type": "pause"}))
            _receive_until(ws, "unset_paused")

    def test_malformed_input_ignored(self, tc):
        with tc.websocket_connect("/play") as ws:
            _receive_until(ws, "draw_snake")
            ws.send_text("not json")
            ws.send_text(json.dumps(["pause"]))
            ws.send_text(json.dumps({"type": "jump"}))
            ws.send_text(json.dumps({"type": "direction"}))
            ws.send_text(json.dumps({"type": "pause"}))
            _receive_until(ws, "set_paused")

    def test_resume_with_previous_score(self, tc):
        with tc.websocket_connect("/play?score=404") as ws:
            snake = json.loads(ws.receive_text())
            target = json.loads(ws.receive_text())
            score = json.loads(ws.receive_text())
            over = json.loads(ws.receive_text())
            assert snake["event"] == "draw_snake"
            assert len(snake["positions"]) == 30
            assert target["event"] == "draw_target"
            assert score["code"] == 404
            assert over == {"event": "set_game_over"}

            ws.send_text(json.dumps({"type": "new_game"}))
            assert json.loads(ws.receive_text()) == {"event": "reset"}
            fresh = json.loads(ws.receive_text())
            assert fresh["event"] == "draw_score"
            assert fresh["score"] == 0

    def test_unknown_score_starts_fresh(self, tc):
        with tc.websocket_connect("/play?score=999") as ws:
            first = json.loads(ws.receive_text())
        assert first["event"] == "draw_score"
        assert first["score"] == 0

    def test_disconnect_closes_session(self, tc, manager):
        with tc.websocket_connect("/play") as ws:
            _receive_until(ws, "draw_snake")
            assert len(manager) == 1
        assert len(manager) == 0

    def test_session_limit(self):
        manager = SessionManager(max_sessions=1)
        application = create_app()
        application.state.session_manager = manager
        client = TestClient(application)
        with client.websocket_connect("/play") as ws:
            _receive_until(ws, "draw_snake")
            with pytest.raises(WebSocketDisconnect), client.websocket_connect("/play"):
                pass
