"""Display helpers shared by net viewers and exporters."""

from __future__ import annotations

import math

from .catalog import opposite
from .net_model import Face, NetData

__all__ = [
    "DEFAULT_SCALE",
    "DICE_VALUES",
    "MATCH_COLORS",
    "SIDE_PAIR_COLORS",
    "dice_value",
    "fit_scale",
    "is_fold_line",
    "match_color",
    "parallel_pair",
]


DEFAULT_SCALE = 40

# Opposite box sides carry dice values summing to seven.
DICE_VALUES: dict[int, int] = {0: 1, 1: 6, 2: 2, 3: 5, 4: 3, 5: 4}

SIDE_PAIR_COLORS: tuple[str, ...] = ("#ef4444", "#3b82f6", "#22c55e")

MATCH_COLORS: tuple[str, ...] = (
    "#ff0055",
    "#ff8800",
    "#ffcc00",
    "#00dd88",
    "#00aaff",
    "#8800ff",
    "#ff00ff",
    "#aaff00",
    "#0055ff",
)


def fit_scale(
    net: NetData | None,
    workspace_width: float,
    workspace_height: float,
    *,
    zoom: float = 1.0,
    classroom: bool = False,
) -> int:
    """Return the whole-pixel size of one grid cell that fits *net* on screen."""

    if net is None or workspace_width <= 0 or workspace_height <= 0:
        return DEFAULT_SCALE
    if workspace_width < 768:
        padding = 80
    elif classroom:
        padding = 60
    else:
        padding = 100
    available_w = max(workspace_width - padding, 100)
    available_h = max(workspace_height - padding, 100)
    net_w = max(net.total_width, 1)
    net_h = max(net.total_height, 1)
    fitted = min(available_w / net_w, available_h / net_h)
    return max(5, math.floor(fitted * zoom))


def is_fold_line(net: NetData, face: Face, direction: str) -> bool:
    """Return ``True`` when the *direction* edge of *face* is hinged to another face."""

    if face.attach_dir is not None and direction == opposite(face.attach_dir):
        return True
    return any(child.attach_dir == direction for child in net.children(face.id))


def dice_value(face: Face) -> int:
    return DICE_VALUES.get(face.side_id, face.id + 1)


def parallel_pair(face: Face) -> int:
    """Index of the pair of opposite sides *face* belongs to (0, 1 or 2)."""

    return face.side_id // 2


def match_color(match_id: int) -> str:
    return MATCH_COLORS[match_id % len(MATCH_COLORS)]
