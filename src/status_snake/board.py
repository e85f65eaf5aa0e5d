"""Board geometry: dimensions, border mode and free-cell enumeration."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from status_snake.directions import translate


class Board:
    """Rectangular playing field addressed by ``(col, row)``.

    With a soft border, steps off one edge re-enter on the opposite edge.
    With a hard border, steps are left unclamped so the caller can detect
    that the edge was crossed.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 20,
        hard_border: bool = False,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be at least 1×1.")
        self.width = width
        self.height = height
        self.hard_border = hard_border

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, col: int, row: int) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= col < self.width and 0 <= row < self.height

    def wrap(self, col: int, row: int) -> tuple[int, int]:
        """Wrap coordinates around the board edges."""
        return col % self.width, row % self.height

    def step(self, col: int, row: int, direction: int) -> tuple[int, int]:
        """Move one cell in *direction*, honouring the border mode."""
        col, row = translate(col, row, direction)
        if not self.hard_border:
            col, row = self.wrap(col, row)
        return col, row

    def free_cells(
        self, occupied: Iterable[Iterable[int]],
    ) -> list[tuple[int, int]]:
        """Return every on-board cell not listed in *occupied*.

        Only the first two items of each occupied entry are read, so
        snake segments can be passed directly. Cells are returned in
        row-major order.
        """
        mask = np.ones((self.height, self.width), dtype=bool)
        for cell in occupied:
            col, row = tuple(cell)[:2]
            if self.in_bounds(col, row):
                mask[row, col] = False
        rows, cols = np.nonzero(mask)
        return list(zip(cols.tolist(), rows.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize board parameters to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "hard_border": self.hard_border,
        }
