"""Snake representation and movement logic."""

from __future__ import annotations

from collections import deque
from typing import NamedTuple

import numpy as np

from status_snake.board import Board
from status_snake.directions import Direction, as_direction, code_of, opposite


class Segment(NamedTuple):
    """One occupied cell and the direction the snake faced there."""

    col: int
    row: int
    direction: Direction


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.

    Direction changes are buffered in :attr:`pending_direction` and only
    committed by :meth:`move`, so two quick turns between ticks can never
    reverse the snake onto its own neck.

    The constructor does not check that the initial body fits the board;
    :class:`~status_snake.config.GameConfig` validates that.
    """

    def __init__(
        self,
        direction: Direction = Direction.UP,
        col: int = 9,
        row: int = 9,
        width: int = 20,
        height: int = 20,
        hard_border: bool = False,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.board = Board(width=width, height=height, hard_border=hard_border)
        self._initial = (as_direction(direction), col, row, length)
        self.body: deque[Segment] = deque()
        self.direction = self._initial[0]
        self.pending_direction = self.direction
        self.reset()

    def reset(self) -> None:
        """Rebuild the initial body. Border hardness is left untouched."""
        direction, col, row, length = self._initial
        self.direction = direction
        self.pending_direction = direction
        self.body.clear()
        self.body.append(Segment(col, row, direction))
        back = opposite(direction)
        for _ in range(1, length):
            col, row = self.board.step(col, row, back)
            self.body.append(Segment(col, row, direction))

    @property
    def head(self) -> Segment:
        """Return the head segment."""
        return self.body[0]

    @property
    def hard_border(self) -> bool:
        return self.board.hard_border

    def set_border(self, hard: bool = False) -> None:
        """Switch between wrapping and unclamped movement."""
        self.board.hard_border = hard

    def change_direction(self, new_direction: int) -> bool:
        """Buffer a turn for the next move, ignoring 180° reversals.

        Returns True if the turn was accepted.
        """
        new_direction = as_direction(new_direction)
        if new_direction == opposite(self.direction):
            return False
        self.pending_direction = new_direction
        return True

    def move(self, grow: bool = False) -> Segment | None:
        """Move the snake one step forward.

        Returns the removed tail segment, or ``None`` if the snake grew.
        """
        self.direction = self.pending_direction
        col, row, _ = self.body[0]
        col, row = self.board.step(col, row, self.direction)
        self.body.appendleft(Segment(col, row, self.direction))
        if grow:
            return None
        return self.body.pop()

    def positions(self) -> list[Segment]:
        """Return a copy of the body, head first."""
        return list(self.body)

    def occupies(self, col: int, row: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return any(seg.col == col and seg.row == row for seg in self.body)

    def __len__(self) -> int:
        return len(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [[seg.col, seg.row, int(seg.direction)] for seg in self.body],
            "direction": int(self.direction),
            "hard_border": self.hard_border,
        }


_U, _R, _D, _L = (d.vector for d in Direction)

# Orientation of each part of a 64 segment snake, the length reached at the
# last status code. The head faces UP; shape is drawn head to tail.
_SHOWCASE_SHAPE: tuple[tuple[int, int], ...] = (
    _U, _U, _R, _R, _U, _U,
    _U, _L, _D, _L, _L, _L,
    _L, _L, _U, _U, _U, _R,
    _R, _R, _R, _R, _R, _R,
    _R, _U, _U, _U, _L, _L,
    _D, _D, _L, _L, _L, _L,
    _L, _U, _U, _R, _R, _U,
    _U, _L, _L, _U, _R, _R,
    _R, _R, _U, _U, _R, _R,
    _U, _U, _L, _L, _L, _L,
    _D, _D, _L, _U,
)


def showcase_snake(
    length: int,
    rng: np.random.Generator | None = None,
    width: int = 20,
    height: int = 20,
) -> list[Segment]:
    """Build a decorative snake that crawls in from a random board edge.

    Used to illustrate a previous score; the result is never moved. At
    most ``len(_SHOWCASE_SHAPE)`` segments are returned, and fewer when
    the curl would leave a board smaller than 20x20: the body ends at the
    last segment still on the board.
    """
    rng = rng if rng is not None else np.random.default_rng()
    edge = int(rng.integers(4))
    flip = bool(rng.random() >= 0.5)
    span = min(width, height)
    point = int(rng.integers(4, max(span - 4, 5)))

    horizontal = edge in (1, 3)
    reverse = edge in (1, 2)
    if edge == 0:
        col, row = point, -1
    elif edge == 1:
        col, row = width, point
    elif edge == 2:
        col, row = point, height
    else:
        col, row = -1, point

    segments: list[Segment] = []
    for dx, dy in _SHOWCASE_SHAPE[:max(length, 0)]:
        if flip:
            dx = -dx
        if reverse:
            dy = -dy
        if horizontal:
            dx, dy = dy, dx
        col -= dx
        row -= dy
        if not (0 <= col < width and 0 <= row < height):
            break
        segments.append(Segment(col, row, code_of((dx, dy))))
    return segments
