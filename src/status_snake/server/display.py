"""Display adapter that turns controller notifications into JSON messages."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

from status_snake.labels import StatusLabel, label
from status_snake.snake import Segment


def _segment(seg: Segment) -> list[int]:
    return [seg.col, seg.row, int(seg.direction)]


class QueueDisplay:
    """Queues one message per notification for a WebSocket sender to drain.

    Each message is a dict with an ``"event"`` key naming the display call
    plus that call's arguments.
    """

    def __init__(
        self, labels: Callable[[int], StatusLabel] = label,
    ) -> None:
        self.labels = labels
        self.queue: asyncio.Queue[dict] = asyncio.Queue()

    def _emit(self, event: str, **payload) -> None:
        self.queue.put_nowait({"event": event, **payload})

    def draw_snake(self, positions: Sequence[Segment]) -> None:
        self._emit("draw_snake", positions=[_segment(p) for p in positions])

    def update_snake(
        self, positions: Sequence[Segment], removed: Segment | None,
    ) -> None:
        self._emit(
            "update_snake",
            positions=[_segment(p) for p in positions],
            removed=_segment(removed) if removed is not None else None,
        )

    def change_snake_direction(self, direction: int) -> None:
        self._emit("change_snake_direction", direction=direction)

    def draw_target(self, position: tuple[int, int]) -> None:
        self._emit("draw_target", position=list(position))

    def remove_target(self) -> None:
        self._emit("remove_target")

    def draw_score(self, score: int) -> None:
        status = self.labels(score)
        self._emit(
            "draw_score", score=score, code=status.code, message=status.message,
        )

    def set_game_over(self) -> None:
        self._emit("set_game_over")

    def set_paused(self) -> None:
        self._emit("set_paused")

    def unset_paused(self) -> None:
        self._emit("unset_paused")

    def set_border(self, hard: bool) -> None:
        self._emit("set_border", hard=hard)

    def reset(self) -> None:
        self._emit("reset")
