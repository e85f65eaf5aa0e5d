"""Game configuration with JSON persistence."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from status_snake.directions import Direction, InvalidDirectionError, as_direction
from status_snake.snake import Snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board and starting-snake settings for a game session."""

    width: int = 20
    height: int = 20
    hard_border: bool = False
    initial_length: int = 3
    start_col: int | None = None
    start_row: int | None = None
    start_direction: int = int(Direction.UP)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        try:
            as_direction(self.start_direction)
        except InvalidDirectionError as exc:
            raise ValueError(
                f"start_direction must be 0-3, got {self.start_direction!r}."
            ) from exc

        col, row = self.start_position
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise ValueError("start position lies outside the board.")

        cells = [(seg.col, seg.row) for seg in self.make_snake().positions()]
        if self.hard_border and any(
            not (0 <= c < self.width and 0 <= r < self.height)
            for c, r in cells
        ):
            raise ValueError(
                "initial_length does not fit the board from the start "
                "position; increase board size or reduce length."
            )
        if len(set(cells)) != len(cells):
            raise ValueError(
                "initial snake overlaps itself on this board; increase "
                "board size or reduce initial_length."
            )

    @property
    def start_position(self) -> tuple[int, int]:
        """Head cell of the initial snake.

        Unset coordinates default to just left of and above the board
        centre, which is (9, 9) on the default 20x20 board.
        """
        col = self.start_col
        if col is None:
            col = max(0, self.width // 2 - 1)
        row = self.start_row
        if row is None:
            row = max(0, self.height // 2 - 1)
        return col, row

    def make_snake(self) -> Snake:
        """Build a snake in its configured starting position."""
        col, row = self.start_position
        return Snake(
            direction=Direction(self.start_direction),
            col=col,
            row=row,
            width=self.width,
            height=self.height,
            hard_border=self.hard_border,
            length=self.initial_length,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: expected a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"{path}: unknown config keys: {', '.join(unknown)}.")
        return cls(**raw)
