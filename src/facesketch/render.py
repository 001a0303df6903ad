from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from .faces import edges_to_points
from .models import Edge, Face, Point, PointId
from .sketch import Preview, Sketch

FACE_CMAP = "tab20"


def face_color(face_id: PointId, cmap: str = FACE_CMAP) -> str:
    """Stable hex colour for a face id, distinct for neighbouring ids."""
    try:
        from matplotlib import colormaps
        from matplotlib.colors import to_hex
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    colors = colormaps[cmap].colors
    index = face_id if isinstance(face_id, int) else sum(str(face_id).encode("utf-8"))
    return to_hex(colors[index % len(colors)])


def render_png(
    sketch: Sketch,
    output_path: str | Path,
    preview: Optional[Preview] = None,
    face_alpha: float = 0.6,
    edge_color: str = "#f5f5f5",
    snap_edge_color: str = "#ff9f1c",
    point_color: str = "#2b2b2b",
    anchor_color: str = "#2a9d8f",
    cursor_color: str = "#e9c46a",
    background: str = "#000000",
    point_size: float = 12.0,
    padding: float = 10.0,
    dpi: int = 150,
) -> None:
    """Render a sketch to PNG in canvas coordinates (y grows downwards).

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    points = {p.id: p for p in sketch.points}
    if preview is not None:
        for p in preview.points:
            points.setdefault(p.id, p)
    if not points:
        raise ValueError("Nothing to render: the sketch has no points.")

    fig, ax = plt.subplots()
    fig.patch.set_facecolor(background)
    ax.set_facecolor(background)

    for face in sketch.faces:
        _draw_face(ax, face, points, Polygon, face_alpha)

    highlighted = {e.key() for e in preview.snapping_edges} if preview else set()
    edges: list[Edge] = list(sketch.edges) + (list(preview.edges) if preview else [])
    for edge in edges:
        color = snap_edge_color if edge.key() in highlighted else edge_color
        _draw_edge(ax, edge, points, color)

    anchor_id = sketch.anchor.id if sketch.anchor else None
    for point in points.values():
        color = anchor_color if point.id == anchor_id else point_color
        if preview is not None and point in preview.points:
            color = cursor_color
        ax.scatter(point.x, point.y, s=point_size, c=color, zorder=3)

    xs = [p.x for p in points.values()]
    ys = [p.y for p in points.values()]
    ax.set_aspect("equal", "box")
    ax.set_xlim(min(xs) - padding, max(xs) + padding)
    ax.set_ylim(max(ys) + padding, min(ys) - padding)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0, facecolor=background)
    plt.close(fig)


def _resolve(ids: Iterable[PointId], points: dict) -> Sequence[Point]:
    return [points[pid] for pid in ids if pid in points]


def _draw_edge(ax, edge: Edge, points: dict, color: str) -> None:
    if edge.from_id not in points or edge.to_id not in points:
        return
    a = points[edge.from_id]
    b = points[edge.to_id]
    ax.plot([a.x, b.x], [a.y, b.y], color=color, linewidth=1.0)


def _draw_face(ax, face: Face, points: dict, polygon_cls, face_alpha: float) -> None:
    coords = [(p.x, p.y) for p in _resolve(edges_to_points(face.edges), points)]
    if len(coords) < 3:
        return
    color = face_color(face.id)
    ax.add_patch(polygon_cls(coords, closed=True, facecolor=color, edgecolor=color, alpha=face_alpha))
