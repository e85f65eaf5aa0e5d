"""Command-line launcher for the Status Snake server."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from status_snake.config import GameConfig
from status_snake.labels import STATUS_LABELS

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="status-snake",
        description="Serve and configure the Status Snake game.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- serve ---
    serve_p = sub.add_parser("serve", help="Run the game server.")
    serve_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    serve_p.add_argument("--host", type=str, default="127.0.0.1")
    serve_p.add_argument("--port", type=int, default=8000)
    serve_p.add_argument("--width", type=int, default=None)
    serve_p.add_argument("--height", type=int, default=None)
    serve_p.add_argument(
        "--start-col", type=int, default=None,
        help="Head column of the initial snake (default: near the centre).",
    )
    serve_p.add_argument(
        "--start-row", type=int, default=None,
        help="Head row of the initial snake (default: near the centre).",
    )
    serve_p.add_argument(
        "--hard-border", action="store_true", default=None,
        help="End the game when the snake crosses the board edge.",
    )
    serve_p.add_argument("--seed", type=int, default=None)

    # --- labels ---
    sub.add_parser("labels", help="Print the score label table.")

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Print or write the default configuration.",
    )
    config_p.add_argument(
        "--output", type=str, default=None,
        help="Write the config to this path instead of printing it.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "width": "width",
        "height": "height",
        "start_col": "start_col",
        "start_row": "start_row",
        "hard_border": "hard_border",
        "seed": "seed",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from status_snake.server.app import create_app

    try:
        config = _load_config(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logger.info(
        "Serving %dx%d board (hard border: %s) on %s:%d.",
        config.width, config.height, config.hard_border, args.host, args.port,
    )
    uvicorn.run(create_app(config), host=args.host, port=args.port)
    return 0


def _run_labels(args: argparse.Namespace) -> int:
    for i, entry in enumerate(STATUS_LABELS):
        print(f"{i:>3}  {entry.code}  {entry.message}")  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = GameConfig()
    if args.output:
        config.save(args.output)
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``status-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "serve": _run_serve,
        "labels": _run_labels,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
