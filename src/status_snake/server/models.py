"""Pydantic models for API and WebSocket message schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from status_snake.controller import InputEvent


class InputMessage(BaseModel):
    """Inbound WebSocket message from the player's browser."""

    type: Literal["direction", "pause", "new_game"]
    direction: Literal["up", "right", "down", "left"] | None = None

    @field_validator("direction", mode="before")
    @classmethod
    def _lower(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    def to_event(self) -> InputEvent | None:
        """Map to a controller input, or ``None`` if incomplete."""
        if self.type == "direction":
            if self.direction is None:
                return None
            return InputEvent(self.direction)
        return InputEvent(self.type)


class LabelResponse(BaseModel):
    """A score index and the status code it is displayed as."""

    index: int
    code: int
    message: str


class ConfigResponse(BaseModel):
    """Board settings new sessions are created with."""

    width: int = Field(ge=1)
    height: int = Field(ge=1)
    hard_border: bool
    initial_length: int = Field(ge=1)
    start_col: int
    start_row: int
    start_direction: int = Field(ge=0, le=3)
