"""Cardinal directions as integer codes and unit displacement vectors."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class InvalidDirectionError(ValueError):
    """Raised for a direction code or vector that is not one of the four."""


class Direction(enum.IntEnum):
    """Cardinal directions numbered clockwise from UP.

    Vectors are ``(dx, dy)`` with ``y`` growing downwards, so UP is
    ``(0, -1)``.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def vector(self) -> tuple[int, int]:
        return _VECTORS[self]


_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_CODES: dict[tuple[int, int], Direction] = {v: d for d, v in _VECTORS.items()}


def as_direction(code: int) -> Direction:
    """Validate a direction code and return it as a :class:`Direction`."""
    try:
        return Direction(code)
    except ValueError as exc:
        raise InvalidDirectionError(f"Invalid direction code: {code!r}") from exc


def vector_of(code: int) -> tuple[int, int]:
    """Return the ``(dx, dy)`` unit vector for a direction code."""
    return _VECTORS[as_direction(code)]


def code_of(vector: Sequence[int]) -> Direction:
    """Return the direction whose unit vector equals *vector*."""
    try:
        key = (int(vector[0]), int(vector[1]))
    except (TypeError, IndexError, ValueError) as exc:
        raise InvalidDirectionError(f"Invalid direction: {vector!r}") from exc
    if len(vector) != 2 or key not in _CODES:
        raise InvalidDirectionError(f"Invalid direction: {vector!r}")
    return _CODES[key]


def opposite(code: int) -> Direction:
    """Return the direction facing the other way."""
    return Direction((as_direction(code) + 2) % 4)


def next_direction(code: int) -> Direction:
    """Rotate 90° clockwise."""
    return Direction((as_direction(code) + 1) % 4)


def previous_direction(code: int) -> Direction:
    """Rotate 90° counterclockwise."""
    return Direction((as_direction(code) + 3) % 4)


def translate(col: int, row: int, code: int) -> tuple[int, int]:
    """Step one unit from ``(col, row)`` without any boundary handling."""
    dx, dy = vector_of(code)
    return col + dx, row + dy
