"""facesketch — snapping and face detection for 2-D sketches.

Public API is organised into layers:

- **Core** — models, config, id generation
- **Geometry** — distances, point/edge snapping, projection
- **Faces** — closed-cycle search through a new edge, edge splitting
- **Sketch** — immutable drawing state and the actions that advance it
- **Rendering** — PNG output (requires matplotlib)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import Coordinates, Point, Edge, Face
from .config import SketchConfig, DEFAULT_CONFIG
from .ids import IdGenerator

# ── Geometry ────────────────────────────────────────────────────────
from .geometry import (
    SNAP_RADIUS,
    SnapResult,
    distance,
    are_points_snapping,
    distance_point_to_line,
    is_point_snapping_edge,
    project_onto_line,
    get_snapping_point_to_edge,
    find_point,
    snap_anchor,
)

# ── Faces ───────────────────────────────────────────────────────────
from .faces import (
    edges_to_points,
    is_face,
    next_edges,
    get_paths,
    get_faces,
    smallest_face,
)
from .split import split_edge, remove_edge

# ── Sketch ──────────────────────────────────────────────────────────
from .sketch import (
    LINE,
    RECTANGLE,
    Sketch,
    Click,
    SelectTool,
    Cancel,
    SplitEdge,
    Preview,
    apply,
    replay,
)

# ── Rendering (lazy: requires matplotlib) ───────────────────────────
from .render import render_png, face_color

__all__ = [
    # Core
    "Coordinates",
    "Point",
    "Edge",
    "Face",
    "SketchConfig",
    "DEFAULT_CONFIG",
    "IdGenerator",
    # Geometry
    "SNAP_RADIUS",
    "SnapResult",
    "distance",
    "are_points_snapping",
    "distance_point_to_line",
    "is_point_snapping_edge",
    "project_onto_line",
    "get_snapping_point_to_edge",
    "find_point",
    "snap_anchor",
    # Faces
    "edges_to_points",
    "is_face",
    "next_edges",
    "get_paths",
    "get_faces",
    "smallest_face",
    "split_edge",
    "remove_edge",
    # Sketch
    "LINE",
    "RECTANGLE",
    "Sketch",
    "Click",
    "SelectTool",
    "Cancel",
    "SplitEdge",
    "Preview",
    "apply",
    "replay",
    # Rendering
    "render_png",
    "face_color",
]
