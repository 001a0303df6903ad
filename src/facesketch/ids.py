from __future__ import annotations

from typing import Iterable


class IdGenerator:
    """Caller-owned counter that mints fresh integer point/face ids.

    Passed explicitly to anything that creates a record so the geometry
    and face functions stay free of global state.
    """

    def __init__(self, start: int = 0) -> None:
        self._last = start

    def __call__(self) -> int:
        self._last += 1
        return self._last

    def peek(self) -> int:
        """Return the last id handed out without minting a new one."""
        return self._last

    def advance_past(self, ids: Iterable[object]) -> None:
        """Skip past every integer id in *ids* so new ids never collide."""
        for value in ids:
            if isinstance(value, int) and value > self._last:
                self._last = value

    def __repr__(self) -> str:
        return f"IdGenerator(last={self._last})"
