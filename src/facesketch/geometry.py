"""Distance tests and snapping for cursor positions against points and edges."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from .config import DEFAULT_CONFIG
from .models import Coordinates, Edge, Point, PointId

logger = logging.getLogger(__name__)

SNAP_RADIUS = DEFAULT_CONFIG.snap_radius_px


def distance(a: Coordinates | Point, b: Coordinates | Point) -> float:
    """Euclidean distance between two positions."""
    dx = abs(b.x - a.x)
    dy = abs(b.y - a.y)
    return math.sqrt(dx**2 + dy**2)


def are_points_snapping(
    a: Coordinates | Point,
    b: Coordinates | Point,
    radius: float = SNAP_RADIUS,
) -> bool:
    return distance(a, b) < radius


def distance_point_to_line(
    point: Coordinates | Point,
    line_a: Coordinates | Point,
    line_b: Coordinates | Point,
) -> float:
    """Distance from *point* to the infinite line through *line_a* and *line_b*.

    Uses the implicit form ``A·x + B·y + C = 0``.  A zero-length line has
    no direction, so the distance to *line_a* is returned instead.
    """
    x1, y1 = line_a.x, line_a.y
    x2, y2 = line_b.x, line_b.y
    a = y2 - y1
    b = x1 - x2
    c = x2 * y1 - y2 * x1
    norm = math.sqrt(a * a + b * b)
    if norm == 0:
        return distance(point, line_a)
    return abs(a * point.x + b * point.y + c) / norm


def find_point(points: Iterable[Point], point_id: PointId) -> Optional[Point]:
    """Return the first point with *point_id*, or ``None``."""
    return next((p for p in points if p.id == point_id), None)


def _edge_endpoints(
    edge: Edge, points: Sequence[Point]
) -> Optional[tuple[Point, Point]]:
    start = find_point(points, edge.from_id)
    end = find_point(points, edge.to_id)
    if start is None or end is None:
        return None
    return start, end


def is_point_snapping_edge(
    point: Coordinates | Point,
    edge: Edge,
    points: Sequence[Point],
    radius: float = SNAP_RADIUS,
) -> bool:
    """True if *point* lies within *radius* of *edge*'s line and inside its bbox.

    The bbox of an exactly axis-aligned edge has no extent across the edge;
    on that axis the point must instead lie closer than half of *radius*, so
    such an edge snaps within radius / 2 (5 units by default), not *radius*.
    Any other edge keeps its own bbox, however thin.  An edge with an
    endpoint missing from *points* never matches.
    """
    endpoints = _edge_endpoints(edge, points)
    if endpoints is None:
        return False
    a, b = endpoints

    return (
        _within_extent(point.x, a.x, b.x, radius / 2)
        and _within_extent(point.y, a.y, b.y, radius / 2)
        and distance_point_to_line(point, a, b) < radius
    )


def _within_extent(value: float, start: float, end: float, tolerance: float) -> bool:
    if start == end:
        return abs(value - start) < tolerance
    return min(start, end) <= value <= max(start, end)


def project_onto_line(
    point: Coordinates | Point,
    line_a: Coordinates | Point,
    line_b: Coordinates | Point,
) -> Optional[tuple[float, float]]:
    """Foot of the perpendicular from *point* onto the line through a and b.

    Vertical and horizontal lines project straight onto their axis; other
    lines use the parametric projection, which stays accurate for nearly
    vertical or nearly horizontal lines where a slope would blow up.
    Returns ``None`` for a zero-length line.
    """
    x1, y1 = line_a.x, line_a.y
    x2, y2 = line_b.x, line_b.y

    if x1 == x2 and y1 == y2:
        return None
    if x1 == x2:
        return (x1, point.y)
    if y1 == y2:
        return (point.x, y1)

    dx = x2 - x1
    dy = y2 - y1
    t = ((point.x - x1) * dx + (point.y - y1) * dy) / (dx * dx + dy * dy)
    return (x1 + t * dx, y1 + t * dy)


def get_snapping_point_to_edge(
    point: Coordinates | Point,
    edge: Edge,
    points: Sequence[Point],
    id_generator: Callable[[], PointId],
) -> Optional[Point]:
    """Create the point where *point* snaps onto *edge*.

    Returns ``None`` (no snap point) if an endpoint is missing or the edge
    has zero length; an id is only minted when a point is produced.
    """
    endpoints = _edge_endpoints(edge, points)
    if endpoints is None:
        return None
    foot = project_onto_line(point, *endpoints)
    if foot is None:
        logger.debug("edge %s has zero length, no snap point", edge)
        return None
    return Point(id_generator(), foot[0], foot[1])


@dataclass(frozen=True)
class SnapResult:
    """Outcome of classifying a cursor position.

    Exactly one of the following holds: *point* is set (the cursor lies on an
    existing point), *edge* is set (the cursor lies on that edge's interior),
    or neither is set (free-standing position).
    """

    position: Coordinates
    point: Optional[Point] = None
    edge: Optional[Edge] = None

    @property
    def kind(self) -> str:
        if self.point is not None:
            return "point"
        if self.edge is not None:
            return "edge"
        return "free"


def snap_anchor(
    position: Coordinates | Point,
    points: Sequence[Point],
    edges: Sequence[Edge],
    radius: float = SNAP_RADIUS,
) -> SnapResult:
    """Classify *position* against the current points, then edges.

    The first match in collection order wins; no nearest-match tie-break
    is attempted.
    """
    cursor = Coordinates(position.x, position.y)

    for candidate in points:
        if are_points_snapping(candidate, cursor, radius):
            logger.debug("cursor %s snaps to point %s", cursor, candidate.id)
            return SnapResult(cursor, point=candidate)

    for edge in edges:
        if is_point_snapping_edge(cursor, edge, points, radius):
            logger.debug("cursor %s snaps to edge %s", cursor, edge)
            return SnapResult(cursor, edge=edge)

    return SnapResult(cursor)
