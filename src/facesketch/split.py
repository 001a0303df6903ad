from __future__ import annotations

import logging
from typing import List, Sequence

from .models import Edge, Point

logger = logging.getLogger(__name__)


def remove_edge(edges: Sequence[Edge], edge: Edge) -> List[Edge]:
    """Return *edges* without any record stored as the same directed pair."""
    return [e for e in edges if e.key() != edge.key()]


def split_edge(edges: Sequence[Edge], edge: Edge, point: Point) -> List[Edge]:
    """Replace *edge* with ``from → point`` and ``point → to``.

    The halves are appended at the end of the collection, so a face search
    run afterwards sees them after every pre-existing edge.
    """
    halves = [Edge(edge.from_id, point.id), Edge(point.id, edge.to_id)]
    logger.debug("split %s at point %s", edge, point.id)
    return remove_edge(edges, edge) + halves


def split_path(path: Sequence[Edge], edge: Edge, point: Point) -> List[Edge]:
    """Replace *edge* inside an ordered *path* with its two halves at the same position.

    Used to keep stored faces in step with a split so their outline is
    unchanged but they only reference live edges.
    """
    result: list[Edge] = []
    for e in path:
        if e.key() == edge.key():
            result.extend((Edge(edge.from_id, point.id), Edge(point.id, edge.to_id)))
        else:
            result.append(e)
    return result
