"""Target placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from status_snake.board import Board

logger = logging.getLogger(__name__)


class TargetSpawner:
    """Places the single target on a uniformly chosen free cell.

    Every free cell is enumerated and one is drawn from them, so the
    choice stays uniform and cheap however crowded the board gets.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.position: tuple[int, int] | None = None

    def spawn(
        self, occupied: Iterable[Iterable[int]],
    ) -> tuple[int, int] | None:
        """Move the target to a random cell not in *occupied*.

        Returns the new position, or ``None`` when the board is full.
        """
        free = self.board.free_cells(occupied)
        if not free:
            logger.warning("No free cells available for the target.")
            self.position = None
            return None
        self.position = free[int(self.rng.integers(len(free)))]
        return self.position

    def remove(self) -> None:
        """Clear the target."""
        self.position = None

    def is_hit(self, col: int, row: int) -> bool:
        """Check whether ``(col, row)`` is the target cell."""
        return self.position == (col, row)

    def to_dict(self) -> dict:
        """Serialize target state to a dictionary."""
        return {
            "position": list(self.position) if self.position is not None else None,
        }
