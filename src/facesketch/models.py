from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

PointId = Union[int, str]


@dataclass(frozen=True)
class Coordinates:
    x: float
    y: float


@dataclass(frozen=True)
class Point:
    id: PointId
    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """A stored edge between two point ids.

    Storage is directed (``from_id`` → ``to_id``) but graph operations treat
    the edge as undirected.  Identity for "already used" checks is the
    directed pair, see :meth:`key`.
    """

    from_id: PointId
    to_id: PointId

    def key(self) -> Tuple[PointId, PointId]:
        return (self.from_id, self.to_id)

    def reversed(self) -> "Edge":
        return Edge(self.to_id, self.from_id)

    def touches(self, other: "Edge") -> bool:
        """True if *other* shares an endpoint with this edge (either direction)."""
        return (
            other.from_id == self.to_id
            or other.to_id == self.from_id
            or other.from_id == self.from_id
            or other.to_id == self.to_id
        )


@dataclass(frozen=True)
class Face:
    id: PointId
    edges: Tuple[Edge, ...] = field(default_factory=tuple)

    def point_ids(self) -> List[PointId]:
        """Distinct point ids in first-seen traversal order."""
        ids: list[PointId] = []
        for edge in self.edges:
            ids.extend((edge.from_id, edge.to_id))
        return list(dict.fromkeys(ids))
