"""Pair up the open edges of a net that meet once the box is folded."""

from __future__ import annotations

from .catalog import DIRECTIONS
from .frames import Propagation
from .net_model import EdgeMatch
from .vectors import QuantizedPoint, segment_key

__all__ = ["DEFAULT_COORDINATE_QUANTUM", "EdgeSlot", "collect_edge_slots", "match_edges"]


DEFAULT_COORDINATE_QUANTUM = 1000

EdgeSlot = tuple[int, str]
SegmentKey = tuple[QuantizedPoint, QuantizedPoint]


def collect_edge_slots(
    propagation: Propagation,
    *,
    quantum: int = DEFAULT_COORDINATE_QUANTUM,
) -> dict[SegmentKey, list[EdgeSlot]]:
    """Group every face edge by the 3D segment it occupies when folded."""

    slots: dict[SegmentKey, list[EdgeSlot]] = {}
    for face_id in propagation.order:
        edges = propagation.frames[face_id].edges()
        for direction in DIRECTIONS:
            start, end = edges[direction]
            slots.setdefault(segment_key(start, end, quantum), []).append((face_id, direction))
    return slots


def match_edges(
    propagation: Propagation,
    *,
    quantum: int = DEFAULT_COORDINATE_QUANTUM,
) -> tuple[tuple[EdgeMatch, ...], dict[int, dict[str, int]]]:
    """Return the cut-edge pairs of *propagation* and per-face match stamps.

    Segments shared by exactly two edges, neither of which is a fold, are
    numbered in the order they were first seen.
    """

    matches: list[EdgeMatch] = []
    stamps: dict[int, dict[str, int]] = {face_id: {} for face_id in propagation.order}
    for entries in collect_edge_slots(propagation, quantum=quantum).values():
        if len(entries) != 2:
            continue
        (face1, edge1), (face2, edge2) = entries
        if propagation.is_fold_edge(face1, edge1) or propagation.is_fold_edge(face2, edge2):
            continue
        match_id = len(matches)
        matches.append(
            EdgeMatch(face1_id=face1, edge1=edge1, face2_id=face2, edge2=edge2, match_id=match_id)
        )
        stamps[face1][edge1] = match_id
        stamps[face2][edge2] = match_id
    return tuple(matches), stamps
