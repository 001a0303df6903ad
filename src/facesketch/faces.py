"""Face detection: enumerate closed simple cycles through a starting edge."""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional, Sequence

from .models import Edge, PointId

logger = logging.getLogger(__name__)

Path = List[Edge]


def edges_to_points(edges: Sequence[Edge]) -> List[PointId]:
    """Distinct endpoint ids of *edges*, in first-seen order."""
    ids: list[PointId] = []
    for edge in edges:
        ids.extend((edge.from_id, edge.to_id))
    return list(dict.fromkeys(ids))


def has_only_paired_vertices(path: Sequence[Edge]) -> bool:
    """True if every endpoint id appears exactly twice across *path*."""
    counts = Counter(pid for edge in path for pid in (edge.from_id, edge.to_id))
    return all(count == 2 for count in counts.values())


def is_face(path: Sequence[Edge]) -> bool:
    """True if *path* is a closed simple cycle of at least three edges."""
    if not path:
        return False
    first = path[0]
    last = path[-1]
    loops = last.to_id == first.from_id or last.from_id == first.to_id
    return loops and len(path) >= 3 and has_only_paired_vertices(path)


def next_edges(
    edges: Sequence[Edge],
    current: Edge,
    path: Sequence[Edge],
) -> List[Edge]:
    """Edges that may follow *current* in *path*.

    A candidate must share an endpoint with *current*, must not already be in
    the path as the same directed pair, and must not be *current* itself in
    its stored orientation.  A reversed copy of a used edge is a different
    edge here.
    """
    used = {edge.key() for edge in path}
    return [
        edge
        for edge in edges
        if current.touches(edge)
        and edge.key() not in used
        and edge.key() != current.key()
    ]


def get_paths(
    edges: Sequence[Edge],
    current: Edge,
    path: Optional[Sequence[Edge]] = None,
) -> List[Path]:
    """Every maximal path extending *path* through *current*.

    A path stops at a dead end, or as soon as it already forms a face; the
    latter is checked before each successor is explored.
    """
    path = list(path or [])
    extended = path + [current]
    successors = next_edges(edges, current, path)

    if not successors:
        return [extended]

    paths: list[Path] = []
    for successor in successors:
        if is_face(extended):
            paths.append(list(extended))
            continue
        paths.extend(get_paths(edges, successor, extended))
    return paths


def get_faces(edges: Sequence[Edge], new_edge: Edge) -> List[Path]:
    """Faces that contain *new_edge*, starting the traversal from it."""
    paths = get_paths(edges, new_edge, [])
    faces = [path for path in paths if is_face(path)]
    logger.debug(
        "face search from %s: %d paths, %d faces", new_edge, len(paths), len(faces)
    )
    return faces


def smallest_face(faces: Sequence[Path]) -> Optional[Path]:
    """Face with the fewest edges; the earliest one wins ties."""
    if not faces:
        return None
    return min(faces, key=len)
