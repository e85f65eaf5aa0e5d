"""Interface of the presentation layer the controller reports to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from status_snake.snake import Segment


class Display(Protocol):
    """One-way notifications sent by :class:`GameController`.

    Implementations only draw; they never feed state back into the game.
    """

    def draw_snake(self, positions: Sequence[Segment]) -> None: ...

    def update_snake(
        self, positions: Sequence[Segment], removed: Segment | None,
    ) -> None: ...

    def change_snake_direction(self, direction: int) -> None: ...

    def draw_target(self, position: tuple[int, int]) -> None: ...

    def remove_target(self) -> None: ...

    def draw_score(self, score: int) -> None: ...

    def set_game_over(self) -> None: ...

    def set_paused(self) -> None: ...

    def unset_paused(self) -> None: ...

    def set_border(self, hard: bool) -> None: ...

    def reset(self) -> None: ...
