from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PIL import Image

from rastergraph import GraphError, GraphRenderer, blank_image, grapher
from rastergraph.functions import FUNCTIONS, resolve_function


LOGGER = logging.getLogger("rastergraph")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="rastergraph")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    grid = sub.add_parser("grid", help="Render an empty coordinate grid.")
    _add_common_args(grid)

    points = sub.add_parser("points", help="Plot discrete points.")
    _add_common_args(points)
    points.add_argument("--x", required=True, help="Comma-separated x values.")
    points.add_argument("--y", required=True, help="Comma-separated y values.")
    points.add_argument("--blank", action="store_true", help="Skip the grid and plot on a plain background.")

    function = sub.add_parser("function", help="Plot a sampled function.")
    _add_common_args(function)
    function.add_argument("--function", choices=sorted(FUNCTIONS), default="identity")
    function.add_argument("--range-low", type=float, default=None)
    function.add_argument("--range-high", type=float, default=None)
    function.add_argument("--blank", action="store_true", help="Skip the grid and plot on a plain background.")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    try:
        renderer = grapher(config=args.config)
        image = blank_image(args.width, args.height)
        _render(renderer, image, args)
    except GraphError as exc:
        LOGGER.error("%s", exc)
        return 2

    args.out.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(image).save(args.out)
    print(f"wrote {args.out} ({args.width}x{args.height})")
    return 0


def _render(renderer: GraphRenderer, image, args: argparse.Namespace) -> None:
    blank = getattr(args, "blank", False)
    if args.command == "grid" or not blank:
        renderer.render_grid(image)

    if args.command == "points":
        xs = _parse_values(args.x, "--x")
        ys = _parse_values(args.y, "--y")
        if blank:
            renderer.render_graph(image, xs, ys)
        else:
            renderer.render_points(image, xs, ys)
    elif args.command == "function":
        f = resolve_function(args.function)
        if blank:
            renderer.render_function_graph(image, f, args.range_low, args.range_high)
        else:
            renderer.render_function(image, f, args.range_low, args.range_high)


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=_positive_int, default=400)
    parser.add_argument("--height", type=_positive_int, default=400)
    parser.add_argument("--config", type=Path, default=None, help="TOML file with [window] and [style] tables.")
    parser.add_argument("--out", type=Path, default=Path("graph.png"))


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value


def _parse_values(raw: str, flag: str) -> list[float]:
    values: list[float] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            values.append(float(item))
        except ValueError as exc:
            raise GraphError(f"{flag} contains a non-numeric value: {item!r}") from exc
    return values


if __name__ == "__main__":
    raise SystemExit(main())
