"""Sketch state and the user actions that transform it.

A :class:`Sketch` is an immutable snapshot of the drawing: its points,
edges, faces, the pending anchor of the active tool, and the tool itself.
Each action produces the next snapshot:

- :class:`Click` places a point with the active tool (line or rectangle)
- :class:`SelectTool` switches tools and drops any pending anchor
- :class:`Cancel` drops the pending anchor
- :class:`SplitEdge` inserts a point onto an edge without drawing

Every click is snapped first (existing point, then edge interior, then
free).  Snapping onto an edge splits it, and the face search for a newly
drawn edge always runs on the post-split edge list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from .config import DEFAULT_CONFIG, SketchConfig
from .faces import Path, get_faces, smallest_face
from .geometry import (
    SnapResult,
    find_point,
    get_snapping_point_to_edge,
    is_point_snapping_edge,
    project_onto_line,
    snap_anchor,
)
from .ids import IdGenerator
from .models import Coordinates, Edge, Face, Point, PointId
from .split import split_edge, split_path

logger = logging.getLogger(__name__)

LINE = "line"
RECTANGLE = "rectangle"
TOOLS = (LINE, RECTANGLE)

# Placeholder ids for preview geometry that is never stored.
CURSOR_ID = -1
PREVIEW_D_ID = -2
PREVIEW_B_ID = -3


# ═══════════════════════════════════════════════════════════════════
# Actions
# ═══════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Click:
    x: float
    y: float


@dataclass(frozen=True)
class SelectTool:
    tool: str


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class SplitEdge:
    edge: Edge
    x: float
    y: float


Action = Union[Click, SelectTool, Cancel, SplitEdge]


@dataclass(frozen=True)
class Preview:
    """What the canvas shows while the cursor hovers, before a click.

    *snap* classifies the cursor, *snapping_edges* are the edges to
    highlight, and *points*/*edges* are the provisional geometry of the
    active tool (the rubber-band line or rectangle).
    """

    snap: SnapResult
    snapping_edges: Tuple[Edge, ...]
    points: Tuple[Point, ...]
    edges: Tuple[Edge, ...]


# ═══════════════════════════════════════════════════════════════════
# Sketch
# ═══════════════════════════════════════════════════════════════════


class Sketch:
    """Immutable snapshot of points, edges and faces drawn so far.

    *id_generator* is the caller's counter; it is shared by every snapshot
    derived from this one so ids stay unique across transitions.
    """

    def __init__(
        self,
        points: Sequence[Point] = (),
        edges: Sequence[Edge] = (),
        faces: Sequence[Face] = (),
        anchor: Optional[Point] = None,
        tool: str = LINE,
        config: Optional[SketchConfig] = None,
        id_generator: Optional[Callable[[], PointId]] = None,
    ) -> None:
        if tool not in TOOLS:
            raise ValueError(f"Unknown tool {tool!r}; expected one of {TOOLS}")
        self.points: Tuple[Point, ...] = tuple(points)
        self.edges: Tuple[Edge, ...] = tuple(edges)
        self.faces: Tuple[Face, ...] = tuple(faces)
        self.anchor = anchor
        self.tool = tool
        self.config = config or DEFAULT_CONFIG
        if id_generator is None:
            id_generator = IdGenerator()
            id_generator.advance_past(p.id for p in self.points)
            id_generator.advance_past(f.id for f in self.faces)
        self.id_generator = id_generator

    def __repr__(self) -> str:
        return (
            f"Sketch(points={len(self.points)}, edges={len(self.edges)}, "
            f"faces={len(self.faces)}, tool={self.tool!r}, "
            f"anchor={self.anchor.id if self.anchor else None})"
        )

    def _replace(self, **changes) -> "Sketch":
        state = {
            "points": self.points,
            "edges": self.edges,
            "faces": self.faces,
            "anchor": self.anchor,
            "tool": self.tool,
            "config": self.config,
            "id_generator": self.id_generator,
        }
        state.update(changes)
        return Sketch(**state)

    # ── Lookups ─────────────────────────────────────────────────────

    def point(self, point_id: PointId) -> Optional[Point]:
        return find_point(self.points, point_id)

    def face_points(self, face: Face) -> List[Point]:
        """Resolved points of *face* in traversal order, skipping missing ids."""
        by_id: Dict[PointId, Point] = {p.id: p for p in self.points}
        return [by_id[pid] for pid in face.point_ids() if pid in by_id]

    def validate(self) -> list[str]:
        errors: list[str] = []
        point_ids = {p.id for p in self.points}
        edge_keys = {e.key() for e in self.edges}

        for edge in self.edges:
            if edge.from_id == edge.to_id:
                errors.append(f"Edge {edge.key()} starts and ends at the same point")
            for point_id in edge.key():
                if point_id not in point_ids:
                    errors.append(f"Edge {edge.key()} references missing point {point_id}")

        for face in self.faces:
            for edge in face.edges:
                if edge.key() not in edge_keys:
                    errors.append(f"Face {face.id} references missing edge {edge.key()}")

        return errors

    # ── Snapping ────────────────────────────────────────────────────

    def snap(self, x: float, y: float) -> SnapResult:
        return snap_anchor(
            Coordinates(x, y), self.points, self.edges, self.config.snap_radius_px
        )

    def resolve(self, x: float, y: float) -> Tuple["Sketch", Point]:
        """Resolve a click to a point, adding or splitting as needed.

        Returns the next snapshot (with any new point and split edges) and
        the point the click resolved to.
        """
        snap = self.snap(x, y)
        if snap.point is not None:
            return self, snap.point

        if snap.edge is not None:
            split = self._split_at(snap.edge, snap.position)
            if split is not None:
                return split
            logger.debug("edge %s gave no snap point, placing a free point", snap.edge)

        point = Point(self.id_generator(), x, y)
        return self._replace(points=self.points + (point,)), point

    def _split_at(
        self, edge: Edge, position: Coordinates
    ) -> Optional[Tuple["Sketch", Point]]:
        point = get_snapping_point_to_edge(position, edge, self.points, self.id_generator)
        if point is None:
            return None
        points = self.points + (point,)
        edges = split_edge(self.edges, edge, point)
        faces = tuple(
            replace(face, edges=tuple(split_path(face.edges, edge, point)))
            for face in self.faces
        )
        return self._replace(points=points, edges=tuple(edges), faces=faces), point

    # ── Actions ─────────────────────────────────────────────────────

    def apply(self, action: Action) -> "Sketch":
        if isinstance(action, Click):
            if self.tool == RECTANGLE:
                return self._click_rectangle(action.x, action.y)
            return self._click_line(action.x, action.y)
        if isinstance(action, SelectTool):
            if action.tool not in TOOLS:
                raise ValueError(f"Unknown tool {action.tool!r}; expected one of {TOOLS}")
            return self._replace(tool=action.tool, anchor=None)
        if isinstance(action, Cancel):
            return self._replace(anchor=None)
        if isinstance(action, SplitEdge):
            return self._split_edge(action)
        raise TypeError(f"Unsupported action {action!r}")

    def _click_line(self, x: float, y: float) -> "Sketch":
        sketch, target = self.resolve(x, y)
        anchor = self.anchor
        if anchor is None:
            return sketch._replace(anchor=target)
        if target.id == anchor.id:
            logger.debug("click resolved to the anchor %s, no edge drawn", anchor.id)
            return sketch

        edge = Edge(anchor.id, target.id)
        edges = sketch.edges + (edge,)
        found = get_faces(edges, edge)
        faces = sketch.faces + tuple(sketch._new_faces(found))
        return sketch._replace(edges=edges, faces=faces, anchor=None)

    def _click_rectangle(self, x: float, y: float) -> "Sketch":
        sketch, c = self.resolve(x, y)
        a = self.anchor
        if a is None:
            return sketch._replace(anchor=c)
        if c.x == a.x or c.y == a.y:
            logger.debug("rectangle from %s to %s has no area, nothing drawn", a.id, c.id)
            return sketch

        #  D ---- C
        #  |      |
        #  A ---- B
        b = Point(self.id_generator(), c.x, a.y)
        d = Point(self.id_generator(), a.x, c.y)
        sides = (
            Edge(a.id, b.id),
            Edge(b.id, c.id),
            Edge(c.id, d.id),
            Edge(d.id, a.id),
        )
        face = Face(self.id_generator(), sides)
        logger.info("rectangle face %s added", face.id)
        return sketch._replace(
            points=sketch.points + (b, d),
            edges=sketch.edges + sides,
            faces=sketch.faces + (face,),
            anchor=None,
        )

    def _split_edge(self, action: SplitEdge) -> "Sketch":
        if action.edge.key() not in {e.key() for e in self.edges}:
            raise ValueError(f"Edge {action.edge.key()} is not part of the sketch")
        position = Coordinates(action.x, action.y)
        if not is_point_snapping_edge(
            position, action.edge, self.points, self.config.snap_radius_px
        ):
            logger.debug("%s is not on edge %s, nothing split", position, action.edge)
            return self
        split = self._split_at(action.edge, position)
        if split is None:
            return self
        return split[0]

    def _new_faces(self, found: Sequence[Path]) -> List[Face]:
        if self.config.keep_all_faces:
            # each cycle is found once per traversal direction
            chosen = []
            seen: set[frozenset] = set()
            for path in found:
                keys = frozenset(e.key() for e in path)
                if keys not in seen:
                    seen.add(keys)
                    chosen.append(path)
        else:
            smallest = smallest_face(found)
            chosen = [smallest] if smallest is not None else []

        faces = [Face(self.id_generator(), tuple(path)) for path in chosen]
        for face in faces:
            logger.info("face %s closed with %d edges", face.id, len(face.edges))
        return faces

    # ── Preview ─────────────────────────────────────────────────────

    def preview(self, x: float, y: float) -> Preview:
        """Rubber-band geometry for a cursor at (x, y); nothing is stored."""
        radius = self.config.snap_radius_px
        snap = self.snap(x, y)
        snapping_edges = tuple(
            e for e in self.edges if is_point_snapping_edge(snap.position, e, self.points, radius)
        )

        target = self._preview_target(snap)
        if self.anchor is None:
            return Preview(snap, snapping_edges, (target,), ())

        a = self.anchor
        if self.tool == LINE:
            return Preview(snap, snapping_edges, (target,), (Edge(a.id, target.id),))

        d = Point(PREVIEW_D_ID, a.x, target.y)
        b = Point(PREVIEW_B_ID, target.x, a.y)
        edges = (
            Edge(a.id, b.id),
            Edge(b.id, target.id),
            Edge(target.id, d.id),
            Edge(d.id, a.id),
        )
        return Preview(snap, snapping_edges, (target, d, b), edges)

    def _preview_target(self, snap: SnapResult) -> Point:
        if snap.point is not None:
            return snap.point
        x, y = snap.position.x, snap.position.y
        if snap.edge is not None:
            a = self.point(snap.edge.from_id)
            b = self.point(snap.edge.to_id)
            foot = project_onto_line(snap.position, a, b) if a and b else None
            if foot is not None:
                x, y = foot
        return Point(CURSOR_ID, x, y)


def apply(sketch: Sketch, action: Action) -> Sketch:
    """Return the snapshot that follows *sketch* after *action*."""
    return sketch.apply(action)


def replay(sketch: Sketch, actions: Sequence[Action]) -> Sketch:
    for action in actions:
        sketch = sketch.apply(action)
    return sketch
