"""Shared fixtures: a manually advanced clock and a recording display."""

from __future__ import annotations

import pytest


class _Handle:
    def __init__(self, due_ms: int, callback) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeClock:
    """Event-loop stand-in whose time only moves when told to.

    Deadlines are kept in whole milliseconds so float rounding in the
    scheduler cannot shift a tick by one step.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._handles: list[_Handle] = []

    def time(self) -> float:
        return self.now_ms / 1000

    def call_at(self, when: float, callback) -> _Handle:
        handle = _Handle(round(when * 1000), callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[_Handle]:
        return [h for h in self._handles if not h.cancelled]

    def advance(self, ms: int) -> None:
        """Move time forward, running every callback that falls due."""
        target = self.now_ms + ms
        while True:
            due = [h for h in self.pending if h.due_ms <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due_ms)
            self._handles.remove(handle)
            self.now_ms = max(self.now_ms, handle.due_ms)
            handle.callback()
        self.now_ms = target

    def stall(self, ms: int) -> None:
        """Move time forward without running anything, like a blocked loop."""
        self.now_ms += ms


class RecordingDisplay:
    """Display that records every notification as ``(name, args)``."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def last(self, name: str) -> tuple:
        for call_name, args in reversed(self.calls):
            if call_name == name:
                return args
        raise AssertionError(f"{name} was never called")

    def draw_snake(self, positions) -> None:
        self.calls.append(("draw_snake", (positions,)))

    def update_snake(self, positions, removed) -> None:
        self.calls.append(("update_snake", (positions, removed)))

    def change_snake_direction(self, direction) -> None:
        self.calls.append(("change_snake_direction", (direction,)))

    def draw_target(self, position) -> None:
        self.calls.append(("draw_target", (position,)))

    def remove_target(self) -> None:
        self.calls.append(("remove_target", ()))

    def draw_score(self, score) -> None:
        self.calls.append(("draw_score", (score,)))

    def set_game_over(self) -> None:
        self.calls.append(("set_game_over", ()))

    def set_paused(self) -> None:
        self.calls.append(("set_paused", ()))

    def unset_paused(self) -> None:
        self.calls.append(("unset_paused", ()))

    def set_border(self, hard) -> None:
        self.calls.append(("set_border", (hard,)))

    def reset(self) -> None:
        self.calls.append(("reset", ()))


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def display() -> RecordingDisplay:
    return RecordingDisplay()
