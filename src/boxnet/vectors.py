"""Small 3-vector helpers shared by the net generator."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = [
    "Point3",
    "QuantizedPoint",
    "vector",
    "quantize_point",
    "segment_key",
    "dominant_axis",
]


Point3 = np.ndarray
QuantizedPoint = tuple[int, int, int]


def vector(x: float, y: float, z: float) -> Point3:
    """Return a float 3-vector."""

    return np.array((x, y, z), dtype=float)


def quantize_point(point: Sequence[float] | np.ndarray, quantum: int) -> QuantizedPoint:
    """Map *point* onto an integer lattice with ``quantum`` steps per unit.

    Rotations in the net model are multiples of 90 degrees, so every corner is
    a signed sum of box extents. Rounding onto a fixed lattice makes points that
    are equal up to floating point noise compare and hash identically, and
    collapses ``-0.0`` onto ``0``.
    """

    x, y, z = (int(round(value * quantum)) for value in np.asarray(point, dtype=float).tolist())
    return (x, y, z)


def segment_key(
    start: Sequence[float] | np.ndarray,
    end: Sequence[float] | np.ndarray,
    quantum: int,
) -> tuple[QuantizedPoint, QuantizedPoint]:
    """Return an orientation independent key for the segment ``start -> end``."""

    first = quantize_point(start, quantum)
    second = quantize_point(end, quantum)
    return (first, second) if first <= second else (second, first)


def dominant_axis(direction: Sequence[float] | np.ndarray) -> tuple[int, int]:
    """Return ``(axis, sign)`` of the largest component of *direction*."""

    values = np.asarray(direction, dtype=float)
    axis = int(np.argmax(np.abs(values)))
    sign = 1 if values[axis] > 0 else -1
    return axis, sign
