"""Overlay two nets and classify which of their edges coincide."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from .alignment import NetAlignment, Point2, js_round, net_alignment
from .net_model import NetData
from .presentation import is_fold_line

__all__ = [
    "EdgeUnit",
    "NetBounds",
    "NetComparison",
    "build_edges",
    "compare_nets",
    "hit_test",
    "net_bounds",
    "translate_edges",
]


EdgeKind = Literal["solid", "fold"]
Side = Literal["left", "right"]
EdgeKey = tuple[tuple[float, float], tuple[float, float]]


@dataclass(frozen=True, slots=True)
class EdgeUnit:
    """A flat edge in grid units, endpoints ordered left-to-right then top-to-bottom."""

    x1: float
    y1: float
    x2: float
    y2: float
    kind: EdgeKind

    def normalized(self) -> "EdgeUnit":
        if self.x1 < self.x2 or (self.x1 == self.x2 and self.y1 <= self.y2):
            return self
        return replace(self, x1=self.x2, y1=self.y2, x2=self.x1, y2=self.y1)

    def translated(self, dx: float, dy: float) -> "EdgeUnit":
        return replace(self, x1=self.x1 + dx, y1=self.y1 + dy, x2=self.x2 + dx, y2=self.y2 + dy)


def _quantize(value: float) -> float:
    return js_round(value * 2) / 2


def edge_key(edge: EdgeUnit) -> EdgeKey:
    """Half-unit quantised, orientation independent key of *edge*."""

    p1 = (_quantize(edge.x1), _quantize(edge.y1))
    p2 = (_quantize(edge.x2), _quantize(edge.y2))
    return (p1, p2) if p1 <= p2 else (p2, p1)


def build_edges(net: NetData) -> dict[EdgeKey, EdgeUnit]:
    """Return every face edge of *net* relative to its root face centre.

    Where a cut edge and a fold edge share a position the fold wins.
    """

    root = net.root_face
    if root is None:
        return {}
    cx, cy = root.center

    edges: dict[EdgeKey, EdgeUnit] = {}
    for face in net.faces:
        left, top = face.x, face.y
        right, bottom = face.x + face.width, face.y + face.height
        segments = (
            ("up", left, top, right, top),
            ("right", right, top, right, bottom),
            ("down", right, bottom, left, bottom),
            ("left", left, bottom, left, top),
        )
        for direction, x1, y1, x2, y2 in segments:
            kind: EdgeKind = "fold" if is_fold_line(net, face, direction) else "solid"
            edge = EdgeUnit(x1 - cx, y1 - cy, x2 - cx, y2 - cy, kind).normalized()
            key = edge_key(edge)
            existing = edges.get(key)
            if existing is None or (existing.kind == "solid" and kind == "fold"):
                edges[key] = edge
    return edges


def translate_edges(edges: dict[EdgeKey, EdgeUnit], offset: Point2) -> dict[EdgeKey, EdgeUnit]:
    """Shift *edges* by *offset* grid units and re-key them."""

    moved: dict[EdgeKey, EdgeUnit] = {}
    for edge in edges.values():
        shifted = edge.translated(offset[0], offset[1]).normalized()
        moved[edge_key(shifted)] = shifted
    return moved


@dataclass(frozen=True, slots=True)
class NetComparison:
    """Edges of two overlaid nets split by where they appear."""

    overlap: tuple[EdgeUnit, ...]
    left_only: tuple[EdgeUnit, ...]
    right_only: tuple[EdgeUnit, ...]

    @property
    def identical(self) -> bool:
        return not self.left_only and not self.right_only


def _offset_units(alignment: NetAlignment, pan: Point2, scale: float) -> Point2:
    return (
        (alignment.base_offset[0] + pan[0]) / scale,
        (alignment.base_offset[1] + pan[1]) / scale,
    )


def compare_nets(
    left: NetData,
    right: NetData,
    scale: float,
    *,
    left_pan: Point2 = (0.0, 0.0),
    right_pan: Point2 = (0.0, 0.0),
) -> NetComparison:
    """Overlay *left* and *right*, each centred on its root face plus a pixel pan."""

    left_edges = translate_edges(
        build_edges(left), _offset_units(net_alignment(left, scale), left_pan, scale)
    )
    right_edges = translate_edges(
        build_edges(right), _offset_units(net_alignment(right, scale), right_pan, scale)
    )

    overlap: list[EdgeUnit] = []
    left_only: list[EdgeUnit] = []
    for key, edge in left_edges.items():
        other = right_edges.get(key)
        if other is None:
            left_only.append(edge)
            continue
        kind: EdgeKind = "solid" if "solid" in (edge.kind, other.kind) else "fold"
        overlap.append(replace(edge, kind=kind))
    right_only = [edge for key, edge in right_edges.items() if key not in left_edges]
    return NetComparison(tuple(overlap), tuple(left_only), tuple(right_only))


@dataclass(frozen=True, slots=True)
class NetBounds:
    """Pixel-space bounding box of a drawn net."""

    left: float
    top: float
    right: float
    bottom: float

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.right and self.top <= y <= self.bottom


def net_bounds(
    net: NetData,
    alignment: NetAlignment,
    pan: Point2,
    canvas_size: tuple[float, float],
    scale: float,
) -> NetBounds | None:
    """Return where *net* is drawn on a canvas of *canvas_size* pixels."""

    if alignment.root_face is None:
        return None
    origin_x = canvas_size[0] / 2 + alignment.base_offset[0] + pan[0]
    origin_y = canvas_size[1] / 2 + alignment.base_offset[1] + pan[1]
    root_x, root_y = alignment.root_center
    return NetBounds(
        left=origin_x - root_x * scale,
        top=origin_y - root_y * scale,
        right=origin_x + (net.total_width - root_x) * scale,
        bottom=origin_y + (net.total_height - root_y) * scale,
    )


def hit_test(
    x: float,
    y: float,
    left: NetBounds | None,
    right: NetBounds | None,
    *,
    active_side: Side = "left",
) -> Side | None:
    """Return which net lies under ``(x, y)``; the active side wins ties."""

    left_hit = left is not None and left.contains(x, y)
    right_hit = right is not None and right.contains(x, y)
    if left_hit and right_hit:
        return active_side
    if left_hit:
        return "left"
    if right_hit:
        return "right"
    return None
