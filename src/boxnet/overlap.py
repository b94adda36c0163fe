"""Axis-aligned overlap checks for flattened faces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

__all__ = ["DEFAULT_OVERLAP_EPSILON", "Rect", "find_overlap", "rectangles_overlap"]


DEFAULT_OVERLAP_EPSILON = 0.05


@dataclass(frozen=True, slots=True)
class Rect:
    """Placement of a face in the flattened layout."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def shifted(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


def rectangles_overlap(a: Rect, b: Rect, *, epsilon: float = DEFAULT_OVERLAP_EPSILON) -> bool:
    """Return ``True`` when *a* and *b* share interior area.

    Both rectangles are shrunk by *epsilon* first, so rectangles that only
    touch along an edge or at a corner do not overlap.
    """

    return (
        b.x < a.right - epsilon
        and b.right > a.x + epsilon
        and b.y < a.bottom - epsilon
        and b.bottom > a.y + epsilon
    )


def find_overlap(
    candidate: Rect,
    placed: Iterable[tuple[int, Rect]],
    *,
    epsilon: float = DEFAULT_OVERLAP_EPSILON,
) -> int | None:
    """Return the id of the first placed face overlapping *candidate*."""

    for face_id, rect in placed:
        if rectangles_overlap(candidate, rect, epsilon=epsilon):
            return face_id
    return None
