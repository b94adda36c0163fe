"""Propagate local coordinate frames across a pattern's attachment tree.

Every face carries a frame: the 3D position of its flattened top-left corner,
3D directions for its flattened right and down axes, its normal, and the box
extents measured along those three directions. Attaching a child across one
of the parent's edges is a 90 degree rotation about that edge, which swaps
the parent's depth with one of its in-plane extents.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .catalog import DIRECTIONS, NetPattern, PatternLink, opposite
from .overlap import DEFAULT_OVERLAP_EPSILON, Rect, find_overlap
from .vectors import Point3, vector

__all__ = [
    "FaceFrame",
    "InfeasibleLayoutError",
    "MalformedPatternError",
    "NetGenerationError",
    "Propagation",
    "ROOT_FACE_ID",
    "order_links",
    "propagate_frames",
    "root_frame",
]


ROOT_FACE_ID = 0


class NetGenerationError(ValueError):
    """Raised when a pattern cannot be unfolded for the requested extents."""


class MalformedPatternError(NetGenerationError):
    """Raised when a pattern does not describe a tree rooted at face 0."""


class InfeasibleLayoutError(NetGenerationError):
    """Raised when two flattened faces would overlap."""

    def __init__(self, face_id: int, other_id: int):
        self.face_id = face_id
        self.other_id = other_id
        super().__init__(f"Face {face_id} overlaps face {other_id} in the flattened layout.")


@dataclass(frozen=True, slots=True)
class FaceFrame:
    """Local frame of a single face while the net is being unfolded."""

    origin: Point3
    right: Point3
    down: Point3
    normal: Point3
    w: float
    h: float
    d: float

    def attach(self, direction: str) -> "FaceFrame":
        """Return the frame of a face attached on the *direction* edge."""

        if direction == "right":
            return FaceFrame(
                origin=self.origin + self.right * self.w,
                right=self.normal,
                down=self.down,
                normal=-self.right,
                w=self.d,
                h=self.h,
                d=self.w,
            )
        if direction == "left":
            right = -self.normal
            return FaceFrame(
                origin=self.origin - right * self.d,
                right=right,
                down=self.down,
                normal=self.right,
                w=self.d,
                h=self.h,
                d=self.w,
            )
        if direction == "down":
            return FaceFrame(
                origin=self.origin + self.down * self.h,
                right=self.right,
                down=self.normal,
                normal=-self.down,
                w=self.w,
                h=self.d,
                d=self.h,
            )
        if direction == "up":
            down = -self.normal
            return FaceFrame(
                origin=self.origin - down * self.d,
                right=self.right,
                down=down,
                normal=self.down,
                w=self.w,
                h=self.d,
                d=self.h,
            )
        raise MalformedPatternError(f"Unknown link direction {direction!r}.")

    def corners(self) -> tuple[Point3, Point3, Point3, Point3]:
        """Return the 3D corners top-left, top-right, bottom-right, bottom-left."""

        c0 = self.origin
        c1 = c0 + self.right * self.w
        c2 = c1 + self.down * self.h
        c3 = c0 + self.down * self.h
        return c0, c1, c2, c3

    def edges(self) -> dict[str, tuple[Point3, Point3]]:
        """Return each boundary edge as a directed 3D segment."""

        c0, c1, c2, c3 = self.corners()
        segments = ((c0, c1), (c1, c2), (c2, c3), (c3, c0))
        return dict(zip(DIRECTIONS, segments))


def root_frame(length: float, width: float, height: float) -> FaceFrame:
    """Return the frame of face 0 lying in the z=0 plane."""

    return FaceFrame(
        origin=vector(0.0, 0.0, 0.0),
        right=vector(1.0, 0.0, 0.0),
        down=vector(0.0, 1.0, 0.0),
        normal=vector(0.0, 0.0, -1.0),
        w=float(length),
        h=float(width),
        d=float(height),
    )


@dataclass(frozen=True, slots=True)
class Propagation:
    """Frames and placements of every face, in placement order."""

    order: tuple[int, ...]
    frames: dict[int, FaceFrame]
    placements: dict[int, Rect]
    links: dict[int, PatternLink]
    fold_edges: frozenset[tuple[int, str]]

    def is_fold_edge(self, face_id: int, direction: str) -> bool:
        return (face_id, direction) in self.fold_edges


def order_links(links: Sequence[PatternLink]) -> list[PatternLink]:
    """Order *links* so every parent face is placed before its children.

    Links keep their authored order wherever it is already valid; a link whose
    parent is not placed yet waits until it is.
    """

    placed = {ROOT_FACE_ID}
    pending = list(links)
    ordered: list[PatternLink] = []
    while pending:
        progressed = False
        remaining: list[PatternLink] = []
        for link in pending:
            if link.from_id in placed:
                if link.to_id in placed:
                    raise MalformedPatternError(f"Face {link.to_id} is attached more than once.")
                ordered.append(link)
                placed.add(link.to_id)
                progressed = True
            else:
                remaining.append(link)
        if not progressed:
            missing = sorted({link.from_id for link in remaining})
            raise MalformedPatternError(f"Faces {missing} are not reachable from the root face.")
        pending = remaining
    return ordered


def propagate_frames(
    pattern: NetPattern | Iterable[PatternLink],
    permutation: Sequence[float],
    *,
    overlap_epsilon: float = DEFAULT_OVERLAP_EPSILON,
) -> Propagation:
    """Unfold *pattern* starting with root extents ``(L, W, H)``.

    Raises :class:`MalformedPatternError` when the links do not form a tree
    rooted at face 0, and :class:`InfeasibleLayoutError` as soon as a new face
    overlaps one already placed.
    """

    links = pattern.structure if isinstance(pattern, NetPattern) else tuple(pattern)
    if len(permutation) != 3:
        raise ValueError("A starting permutation needs exactly three extents.")

    length, width, height = (float(value) for value in permutation)
    frames: dict[int, FaceFrame] = {ROOT_FACE_ID: root_frame(length, width, height)}
    placements: dict[int, Rect] = {ROOT_FACE_ID: Rect(0.0, 0.0, length, width)}
    parent_links: dict[int, PatternLink] = {}
    fold_edges: set[tuple[int, str]] = set()

    for link in order_links(links):
        parent_frame = frames[link.from_id]
        parent_rect = placements[link.from_id]
        frame = parent_frame.attach(link.direction)

        x, y = parent_rect.x, parent_rect.y
        if link.direction == "right":
            x += parent_rect.width
        elif link.direction == "left":
            x -= frame.w
        elif link.direction == "down":
            y += parent_rect.height
        else:
            y -= frame.h
        rect = Rect(x, y, frame.w, frame.h)

        other = find_overlap(rect, placements.items(), epsilon=overlap_epsilon)
        if other is not None:
            raise InfeasibleLayoutError(link.to_id, other)

        fold_edges.add((link.from_id, link.direction))
        fold_edges.add((link.to_id, opposite(link.direction)))
        frames[link.to_id] = frame
        placements[link.to_id] = rect
        parent_links[link.to_id] = link

    return Propagation(
        order=tuple(placements),
        frames=frames,
        placements=placements,
        links=parent_links,
        fold_edges=frozenset(fold_edges),
    )
