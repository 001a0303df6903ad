from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SketchConfig:
    """Tunable constants for snapping and face merging.

    Attributes
    ----------
    snap_radius_px : float
        A cursor closer than this (strictly) to a point or edge line snaps
        onto it.
    keep_all_faces : bool
        When closing an edge discovers several faces, keep all of them
        instead of only the smallest one.
    """

    snap_radius_px: float = 10.0
    keep_all_faces: bool = False

    def __post_init__(self) -> None:
        if self.snap_radius_px <= 0:
            raise ValueError("snap_radius_px must be > 0")


DEFAULT_CONFIG = SketchConfig()
