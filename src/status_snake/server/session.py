"""In-memory session registry for connected players."""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field

import numpy as np

from status_snake.config import GameConfig
from status_snake.controller import GameController
from status_snake.server.display import QueueDisplay

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 100


@dataclass
class GameSession:
    """One player's controller and the display feeding their browser."""

    session_id: str
    controller: GameController
    display: QueueDisplay
    created_at: float = field(default_factory=time.monotonic)


class SessionManager:
    """Creates, tracks and tears down game sessions.

    Sessions share nothing: each has its own snake, scheduler and RNG.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        max_sessions: int = _MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self.config = config or GameConfig()
        self._sessions: dict[str, GameSession] = {}
        self._max_sessions = max_sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self) -> GameSession:
        """Build a new session from the configured settings."""
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Too many active sessions. Try again later.")

        cfg = self.config
        display = QueueDisplay()
        controller = GameController(
            cfg.make_snake(),
            display,
            rng=np.random.default_rng(cfg.seed),
        )
        session = GameSession(
            session_id=uuid.uuid4().hex[:12],
            controller=controller,
            display=display,
        )
        self._sessions[session.session_id] = session
        logger.info("Session %s created.", session.session_id)
        return session

    def close_session(self, session_id: str) -> None:
        """Stop a session's ticks and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return
        session.controller.shutdown()
        logger.info(
            "Session %s closed with score %d after %.0fs.",
            session_id, session.controller.score,
            time.monotonic() - session.created_at,
        )

    def cleanup(self) -> None:
        """Close every session."""
        for session_id in list(self._sessions):
            self.close_session(session_id)
        logger.info("SessionManager cleanup complete.")
