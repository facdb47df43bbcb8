"""Render a sketch file to the terminal.

    python -m termsketch sketch.json [--width W] [--height H] [--guides]

The file uses the same JSON shape as ``POST /api/render``. Width and height
fall back to the file, then to the terminal size.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from termsketch.config import settings
from termsketch.engine.canvas import print_canvas, terminal_dimensions
from termsketch.engine.config import CanvasConfig
from termsketch.engine.sketch import Sketch, create_runner
from termsketch.models.requests import RenderRequest
from termsketch.utils.geometry import Dimensions
from termsketch.utils.log import parse_level, setup_logging

logger = logging.getLogger("termsketch")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termsketch", description="Render a sketch to the terminal")
    parser.add_argument("sketch", help="Sketch JSON file ('-' for stdin)")
    parser.add_argument("--width", type=int, help="Rows (x extent)")
    parser.add_argument("--height", type=int, help="Columns (y extent)")
    parser.add_argument("--blank", help="Glyph for unset cells")
    parser.add_argument("--guides", action="store_true", help="Draw numbered rulers first")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def _load(source: str) -> dict:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    level = parse_level(settings.termsketch_log_level)
    setup_logging(logging.DEBUG if args.verbose else level)

    try:
        data = _load(args.sketch)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read sketch: {e}", file=sys.stderr)
        return 2
    if not isinstance(data, dict):
        print("Sketch must be a JSON object", file=sys.stderr)
        return 2

    terminal = terminal_dimensions(Dimensions(settings.default_width, settings.default_height))
    data.setdefault("width", terminal.width)
    data.setdefault("height", terminal.height)
    if args.width is not None:
        data["width"] = args.width
    if args.height is not None:
        data["height"] = args.height
    if args.blank is not None:
        data["blank"] = args.blank
    if args.guides:
        data["guides"] = True

    try:
        req = RenderRequest.model_validate(data)
    except ValidationError as e:
        print(f"Invalid sketch:\n{e}", file=sys.stderr)
        return 2

    runner = create_runner(CanvasConfig(blank=req.blank, max_cells=settings.max_canvas_cells))
    result = runner.run(
        Sketch(dimensions=req.dimensions, commands=req.commands, blank=req.blank, guides=req.guides)
    )
    print_canvas(result.canvas)

    for key, message in result.errors.items():
        logger.warning("command %s failed: %s", key, message)
    return 1 if result.errors else 0


if __name__ == "__main__":
    sys.exit(main())
