"""REST route handlers for game settings and score labels."""

from __future__ import annotations

from fastapi import APIRouter, Path, Request

from status_snake.labels import STATUS_LABELS, label
from status_snake.server.models import ConfigResponse, LabelResponse

router = APIRouter()


@router.get("/config", tags=["config"])
async def get_config(request: Request) -> ConfigResponse:
    """Board settings used for new sessions."""
    cfg = request.app.state.config
    start_col, start_row = cfg.start_position
    return ConfigResponse(
        width=cfg.width,
        height=cfg.height,
        hard_border=cfg.hard_border,
        initial_length=cfg.initial_length,
        start_col=start_col,
        start_row=start_row,
        start_direction=cfg.start_direction,
    )


@router.get("/labels", tags=["labels"])
async def list_labels() -> list[LabelResponse]:
    """The full score label table."""
    return [
        LabelResponse(index=i, code=entry.code, message=entry.message)
        for i, entry in enumerate(STATUS_LABELS)
    ]


@router.get("/labels/{index}", tags=["labels"])
async def get_label(index: int = Path(ge=0)) -> LabelResponse:
    """Label for a score; scores past the table wrap around."""
    entry = label(index)
    return LabelResponse(index=index, code=entry.code, message=entry.message)
