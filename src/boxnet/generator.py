"""Enumerate every net of a box for the catalog of unfolding patterns."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from .assembly import assemble_net
from .catalog import CUBE_NET_PATTERNS, NetPattern
from .edge_matching import DEFAULT_COORDINATE_QUANTUM, match_edges
from .frames import NetGenerationError, propagate_frames
from .net_model import NetData
from .overlap import DEFAULT_OVERLAP_EPSILON

__all__ = [
    "DEFAULT_SETTINGS",
    "Dimensions",
    "GeneratorSettings",
    "generate_all_nets",
    "generate_net",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Extents of a rectangular box."""

    l: float
    w: float
    h: float

    def __post_init__(self) -> None:
        for name in ("l", "w", "h"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Box dimension '{name}' must be positive.")

    @classmethod
    def cube(cls, size: float) -> "Dimensions":
        return cls(size, size, size)

    @classmethod
    def from_value(cls, value: "Dimensions | Sequence[float] | Mapping[str, Any]") -> "Dimensions":
        if isinstance(value, Dimensions):
            return value
        if isinstance(value, Mapping):
            missing = [key for key in ("l", "w", "h") if key not in value]
            if missing:
                raise KeyError(f"Dimensions mapping is missing {missing}.")
            return cls(float(value["l"]), float(value["w"]), float(value["h"]))
        values = tuple(float(item) for item in value)
        if len(values) != 3:
            raise ValueError("Dimensions require exactly three values.")
        return cls(*values)

    @property
    def is_cube(self) -> bool:
        return self.l == self.w == self.h

    def permutations(self) -> tuple[tuple[float, float, float], ...]:
        """Return the six assignments of ``(l, w, h)`` to the root ``(L, W, H)``."""

        l, w, h = self.l, self.w, self.h
        return ((l, w, h), (l, h, w), (w, l, h), (w, h, l), (h, l, w), (h, w, l))

    def to_mapping(self) -> dict[str, float]:
        return {"l": self.l, "w": self.w, "h": self.h}


@dataclass(frozen=True, slots=True)
class GeneratorSettings:
    """Tolerances used while unfolding."""

    overlap_epsilon: float = DEFAULT_OVERLAP_EPSILON
    coordinate_quantum: int = DEFAULT_COORDINATE_QUANTUM

    def __post_init__(self) -> None:
        if self.overlap_epsilon < 0:
            raise ValueError("Overlap epsilon cannot be negative.")
        if self.coordinate_quantum <= 0:
            raise ValueError("Coordinate quantum must be a positive integer.")


DEFAULT_SETTINGS = GeneratorSettings()


def generate_net(
    pattern: NetPattern,
    permutation: Sequence[float],
    *,
    variant_index: int = 1,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> NetData | None:
    """Unfold *pattern* with root extents *permutation*.

    Returns ``None`` when the pattern is malformed or its faces overlap for
    these proportions.
    """

    try:
        propagation = propagate_frames(
            pattern,
            permutation,
            overlap_epsilon=settings.overlap_epsilon,
        )
    except NetGenerationError as exc:
        logger.debug(
            "Dropping pattern %s variant %s %s: %s",
            pattern.id,
            variant_index,
            tuple(permutation),
            exc,
        )
        return None

    edge_matches, stamps = match_edges(propagation, quantum=settings.coordinate_quantum)
    return assemble_net(
        propagation,
        edge_matches,
        stamps,
        pattern_id=pattern.id,
        variant_index=variant_index,
    )


def generate_all_nets(
    dimensions: Dimensions | Sequence[float] | Mapping[str, Any],
    is_cube: bool,
    *,
    patterns: Iterable[NetPattern] | None = None,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
) -> list[NetData]:
    """Generate every feasible net of a box, sorted by pattern and variant.

    Cubes use the single permutation ``(l, l, l)`` since all orientations
    coincide; cuboids try all six assignments of their extents to the root.
    """

    dims = Dimensions.from_value(dimensions)
    catalog = tuple(CUBE_NET_PATTERNS if patterns is None else patterns)
    if is_cube:
        configs = ((dims.l, dims.l, dims.l),)
    else:
        configs = dims.permutations()

    results: list[NetData] = []
    for pattern in catalog:
        for index, config in enumerate(configs, start=1):
            net = generate_net(pattern, config, variant_index=index, settings=settings)
            if net is not None:
                results.append(net)

    logger.debug(
        "Generated %d of %d nets for %s (cube=%s)",
        len(results),
        len(catalog) * len(configs),
        dims.to_mapping(),
        is_cube,
    )
    return sorted(results, key=lambda net: (net.pattern_id, net.variant_index))
