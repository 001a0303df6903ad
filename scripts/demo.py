"""Draw a rectangle, cut it with a line, and render the result."""

import sys
from pathlib import Path

ROOT = Path(__file__).parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from facesketch import Click, SelectTool, Sketch, SketchConfig, render_png, replay


def main() -> None:
    sketch = replay(
        Sketch(config=SketchConfig(keep_all_faces=True)),
        [
            SelectTool("rectangle"),
            Click(0, 0),
            Click(200, 100),
            SelectTool("line"),
            Click(100, 0),    # lands on the bottom side and splits it
            Click(100, 100),  # splits the top side and closes the left half
        ],
    )
    errors = sketch.validate()
    if errors:
        raise SystemExit("\n".join(errors))

    print("Points:", len(sketch.points))
    print("Edges:", len(sketch.edges))
    print("Faces:", [face.point_ids() for face in sketch.faces])

    out = ROOT / "exports" / "demo_sketch.png"
    render_png(sketch, out)
    print(f"Saved {out}")


if __name__ == "__main__":
    main()
