"""Tick-driven game controller tying snake, scheduler and display together."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable, Sequence

import numpy as np

from status_snake.board import Board
from status_snake.directions import Direction
from status_snake.display import Display
from status_snake.labels import StatusLabel, label
from status_snake.scheduler import Clock, LoopState, TickScheduler
from status_snake.snake import Segment, Snake, showcase_snake
from status_snake.target import TargetSpawner

logger = logging.getLogger(__name__)

MAX_SPEED = 50


def tick_interval(speed: int) -> int:
    """Milliseconds between ticks at *speed* (0-50).

    The curve is quadratic so the steps shrink as the game approaches
    its 50ms floor, where each change is most noticeable.
    """
    speed = min(max(0, speed), MAX_SPEED)
    fraction = 1 - speed / MAX_SPEED
    return 50 + math.floor(fraction ** 2 * 250)


BASE_INTERVAL_MS = tick_interval(0)


class InputEvent(enum.Enum):
    """Discrete player inputs; raw key codes never reach the controller."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    PAUSE = "pause"
    NEW_GAME = "new_game"


_DIRECTION_EVENTS: dict[InputEvent, Direction] = {
    InputEvent.UP: Direction.UP,
    InputEvent.RIGHT: Direction.RIGHT,
    InputEvent.DOWN: Direction.DOWN,
    InputEvent.LEFT: Direction.LEFT,
}


def has_collision(positions: Sequence[Segment], board: Board) -> bool:
    """Check the head against the board edge and every other segment.

    The edge only counts when the board has a hard border.
    """
    if not positions:
        return False
    head = positions[0]
    if board.hard_border and not board.in_bounds(head.col, head.row):
        return True
    return any(
        seg.col == head.col and seg.row == head.row for seg in positions[1:]
    )


class GameController:
    """Runs a single-player game on top of a :class:`TickScheduler`.

    Every tick moves the snake, then checks for a collision (game over)
    or a captured target (score, growth and possibly more speed). Input
    between ticks only touches buffered state: the snake's pending
    direction and the pending-growth flag.
    """

    def __init__(
        self,
        snake: Snake,
        display: Display,
        *,
        labels: Callable[[int], StatusLabel] = label,
        clock: Clock | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.snake = snake
        self.display = display
        self.labels = labels
        self.rng = rng if rng is not None else np.random.default_rng()
        self.targets = TargetSpawner(snake.board, rng=self.rng)
        self.scheduler = TickScheduler(self.tick, clock=clock)

        self.score = 0
        self.speed = 0
        self.game_over = False
        self._grow = False
        self._reset_session()

    @property
    def state(self) -> LoopState:
        return self.scheduler.state

    @property
    def target(self) -> tuple[int, int] | None:
        return self.targets.position

    @property
    def label(self) -> StatusLabel:
        """The status label shown for the current score."""
        return self.labels(self.score)

    @property
    def board(self) -> Board:
        return self.snake.board

    def start(self, initial_score: int = 0) -> None:
        """Begin the first game of a session.

        A non-zero *initial_score* comes from a previous visit: a snake of
        matching length is shown in the game-over state and play waits
        for :attr:`InputEvent.NEW_GAME`.
        """
        if initial_score <= 0:
            self._play()
            return

        self.score = initial_score
        self.game_over = True
        positions = showcase_snake(
            initial_score + 3, self.rng, self.board.width, self.board.height,
        )
        if len(positions) < 3:
            positions = self.snake.positions()
        target = self._showcase_target(positions)

        self.display.draw_snake(positions)
        if target is not None:
            self.display.draw_target(target)
        self.display.draw_score(self.score)
        self.display.set_game_over()
        logger.info("Session resumed in game-over state with score %d.", self.score)

    def new_game(self) -> None:
        """Reset score, speed, snake and display, then start playing."""
        if not self.scheduler.is_stopped:
            self.scheduler.stop()
        self._reset_session()
        self.snake.reset()
        self.display.reset()
        self._play()
        logger.info("New game started.")

    def shutdown(self) -> None:
        """Stop ticking for good, e.g. when the player goes away."""
        if not self.scheduler.is_stopped:
            self.scheduler.stop()

    def handle(self, event: InputEvent) -> None:
        """Dispatch a player input."""
        if event is InputEvent.PAUSE:
            self.toggle_pause()
        elif event is InputEvent.NEW_GAME:
            self.new_game()
        else:
            self.change_direction(_DIRECTION_EVENTS[event])

    def change_direction(self, direction: Direction) -> bool:
        """Buffer a turn; ignored unless the game is running."""
        if not self.scheduler.is_started:
            logger.debug(
                "Ignoring direction %d while %s.", direction, self.state.value,
            )
            return False
        accepted = self.snake.change_direction(direction)
        if accepted:
            self.display.change_snake_direction(int(direction))
        return accepted

    def toggle_pause(self) -> None:
        """Pause a running game or resume a paused one."""
        if self.scheduler.is_started:
            self.display.set_paused()
            self.scheduler.pause()
        elif self.scheduler.is_paused:
            self.display.unset_paused()
            self.scheduler.start()

    def set_border(self, hard: bool) -> None:
        """Switch the board between wrapping and hard edges."""
        self.snake.set_border(hard)
        self.display.set_border(hard)

    def tick(self) -> None:
        """Advance the game by one step."""
        if self.game_over:
            return

        removed = self.snake.move(self._grow)
        self._grow = False
        positions = self.snake.positions()

        if has_collision(positions, self.board):
            self._end_game()
            return

        head = positions[0]
        if self.targets.is_hit(head.col, head.row):
            self._capture_target()
        self.display.update_snake(self.snake.positions(), removed)

    def _reset_session(self) -> None:
        self.score = 0
        self.speed = 0
        self.game_over = False
        self._grow = False
        self.scheduler.set_interval(BASE_INTERVAL_MS)

    def _showcase_target(
        self, positions: list[Segment],
    ) -> tuple[int, int] | None:
        """A target just ahead of a snake crawling in from the edge."""
        if len(positions) >= 3:
            head, third = positions[0], positions[2]
            if head.col in (0, self.board.width - 1):
                target = (head.col, third.row)
            else:
                target = (third.col, head.row)
            occupied = {(seg.col, seg.row) for seg in positions}
            if self.board.in_bounds(*target) and target not in occupied:
                return target
        return self.targets.spawn(positions)

    def _play(self) -> None:
        positions = self.snake.positions()
        self.targets.spawn(positions)

        self.display.draw_score(self.score)
        if self.target is not None:
            self.display.draw_target(self.target)
        self.display.draw_snake(positions)

        self.scheduler.start()

    def _capture_target(self) -> None:
        self.display.remove_target()
        self.targets.remove()
        self._grow = True
        self.score += 1
        if self.score % 2 == 0:
            self._increment_speed()
        self.display.draw_score(self.score)
        if self.targets.spawn(self.snake.positions()) is not None:
            self.display.draw_target(self.target)

    def _increment_speed(self) -> None:
        if self.speed >= MAX_SPEED or self.speed > self.score * 2:
            return
        self.speed += 1
        interval = tick_interval(self.speed)
        self.scheduler.set_interval(interval)
        logger.debug("Speed %d, tick interval %dms.", self.speed, interval)

    def _end_game(self) -> None:
        self.game_over = True
        if not self.scheduler.is_stopped:
            self.scheduler.stop()
        self.display.set_game_over()
        status = self.label
        logger.info(
            "Game over with score %d (%d %s).",
            self.score, status.code, status.message,
        )
