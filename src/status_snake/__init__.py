"""Status Snake: single-player snake scored in HTTP status codes."""

from status_snake.board import Board
from status_snake.config import GameConfig
from status_snake.controller import GameController, InputEvent, tick_interval
from status_snake.directions import Direction, InvalidDirectionError
from status_snake.labels import STATUS_LABELS, StatusLabel, label
from status_snake.scheduler import (
    InvalidIntervalError,
    InvalidTransitionError,
    LoopState,
    TickScheduler,
)
from status_snake.snake import Segment, Snake

__all__ = [
    "STATUS_LABELS",
    "Board",
    "Direction",
    "GameConfig",
    "GameController",
    "InputEvent",
    "InvalidDirectionError",
    "InvalidIntervalError",
    "InvalidTransitionError",
    "LoopState",
    "Segment",
    "Snake",
    "StatusLabel",
    "TickScheduler",
    "label",
    "tick_interval",
]
