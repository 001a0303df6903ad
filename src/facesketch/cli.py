"""facesketch command-line interface."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from .config import SketchConfig
from .sketch import TOOLS, Cancel, Click, SelectTool, Sketch, replay


def parse_click(value: str) -> Click:
    try:
        x, y = (float(part) for part in value.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {value!r}") from exc
    return Click(x, y)


def parse_tool(value: str) -> SelectTool:
    if value not in TOOLS:
        raise argparse.ArgumentTypeError(f"tool must be one of {', '.join(TOOLS)}")
    return SelectTool(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="facesketch CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log snapping and face search")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("replay", help="Replay clicks and report the detected faces")
    run.add_argument(
        "--tool",
        dest="actions",
        type=parse_tool,
        action="append",
        help="Switch tool (line or rectangle); applies to the clicks that follow",
    )
    run.add_argument(
        "--click",
        dest="actions",
        type=parse_click,
        action="append",
        help=(
            "Click at X,Y (repeatable, applied in order); write negative "
            "coordinates as --click=-5,3 so they are not read as an option"
        ),
    )
    run.add_argument(
        "--cancel",
        dest="actions",
        action="append_const",
        const=Cancel(),
        help="Drop the pending anchor",
    )
    run.add_argument("--snap-radius", type=float, default=10.0)
    run.add_argument("--all-faces", action="store_true", help="Keep every face found, not only the smallest")
    run.add_argument("--out", dest="output_path", help="Render the result to PNG")
    run.add_argument("--strict", action="store_true", help="Fail if the result does not validate")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "replay":
        _cmd_replay(args)


def _cmd_replay(args) -> None:
    try:
        config = SketchConfig(snap_radius_px=args.snap_radius, keep_all_faces=args.all_faces)
    except ValueError as exc:
        print(exc)
        raise SystemExit(1)

    sketch = replay(Sketch(config=config), args.actions or [])
    for line in _summary_lines(sketch):
        print(line)

    if args.strict:
        errors = sketch.validate()
        if errors:
            for error in errors:
                print(error)
            raise SystemExit(1)

    if args.output_path:
        from .render import render_png
        render_png(sketch, args.output_path)
        print(f"Saved {args.output_path}")


def _summary_lines(sketch: Sketch) -> List[str]:
    lines = [
        f"points: {len(sketch.points)}",
        f"edges: {len(sketch.edges)}",
        f"faces: {len(sketch.faces)}",
    ]
    for face in sketch.faces:
        path = " -> ".join(str(pid) for pid in face.point_ids())
        lines.append(f"  face {face.id}: {path}")
    return lines


if __name__ == "__main__":
    main()
