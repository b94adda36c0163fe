"""Turn propagated frames into an immutable :class:`NetData`."""

from __future__ import annotations

from typing import Mapping

from .frames import FaceFrame, Propagation
from .net_model import EdgeMatch, Face, NetData
from .vectors import dominant_axis

__all__ = ["assemble_net", "side_id_for_normal"]


# (axis, sign) -> side id: 0/1 for +Z/-Z, 2/3 for +Y/-Y, 4/5 for +X/-X.
_SIDE_IDS: dict[tuple[int, int], int] = {
    (2, 1): 0,
    (2, -1): 1,
    (1, 1): 2,
    (1, -1): 3,
    (0, 1): 4,
    (0, -1): 5,
}


def side_id_for_normal(frame: FaceFrame) -> int:
    """Return the box side a face lands on, from its axis-aligned normal."""

    return _SIDE_IDS[dominant_axis(frame.normal)]


def assemble_net(
    propagation: Propagation,
    edge_matches: tuple[EdgeMatch, ...],
    stamps: Mapping[int, Mapping[str, int]],
    *,
    pattern_id: int,
    variant_index: int,
) -> NetData:
    """Normalise placements so the layout starts at ``(0, 0)`` and package it."""

    rects = propagation.placements
    min_x = min(rect.x for rect in rects.values())
    min_y = min(rect.y for rect in rects.values())
    max_x = max(rect.right for rect in rects.values())
    max_y = max(rect.bottom for rect in rects.values())

    faces: list[Face] = []
    for face_id in propagation.order:
        rect = rects[face_id].shifted(-min_x, -min_y)
        link = propagation.links.get(face_id)
        faces.append(
            Face(
                id=face_id,
                x=rect.x,
                y=rect.y,
                width=rect.width,
                height=rect.height,
                side_id=side_id_for_normal(propagation.frames[face_id]),
                parent_id=link.from_id if link is not None else None,
                attach_dir=link.direction if link is not None else None,
                is_base=link is None,
                edge_match_ids=dict(stamps.get(face_id, {})),
            )
        )

    return NetData(
        id=f"{pattern_id}-{variant_index}",
        pattern_id=pattern_id,
        variant_index=variant_index,
        faces=tuple(faces),
        total_width=max_x - min_x,
        total_height=max_y - min_y,
        min_x=min_x,
        min_y=min_y,
        edge_matches=edge_matches,
    )
