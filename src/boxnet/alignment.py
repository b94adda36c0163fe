"""Centre a net on its root face while keeping faces on the pixel grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .net_model import Face, NetData

__all__ = ["NetAlignment", "Point2", "js_round", "net_alignment"]


Point2 = tuple[float, float]


def js_round(value: float) -> float:
    """Round half towards positive infinity, like ``Math.round`` in browsers."""

    return float(math.floor(value + 0.5))


@dataclass(frozen=True, slots=True)
class NetAlignment:
    """Offsets needed to draw a net with its root face at the view origin."""

    root_face: Face | None
    root_center: Point2
    net_center: Point2
    base_offset: Point2
    center_snap: Point2


def _snap_axis(raw: float, snap: float, scale: float) -> float:
    return js_round((raw - snap) / scale) * scale + snap


def net_alignment(net: NetData, scale: float) -> NetAlignment:
    """Return the pixel offset that puts *net*'s root face at the origin.

    When the root face spans an odd number of grid cells its centre falls in
    the middle of a cell, so the offset is snapped to half-cell positions on
    that axis instead of whole cells.
    """

    root = net.root_face
    if root is None:
        zero = (0.0, 0.0)
        return NetAlignment(None, zero, zero, zero, zero)
    if scale <= 0:
        raise ValueError("Scale must be positive.")

    net_center = (net.total_width / 2, net.total_height / 2)
    root_center = root.center
    center_snap = (
        scale / 2 if root.width % 2 != 0 else 0.0,
        scale / 2 if root.height % 2 != 0 else 0.0,
    )
    raw = (
        (root_center[0] - net_center[0]) * scale,
        (root_center[1] - net_center[1]) * scale,
    )
    base_offset = (
        _snap_axis(raw[0], center_snap[0], scale),
        _snap_axis(raw[1], center_snap[1], scale),
    )
    return NetAlignment(
        root_face=root,
        root_center=root_center,
        net_center=net_center,
        base_offset=base_offset,
        center_snap=center_snap,
    )
