"""Topological patterns describing how the six faces of a box unfold."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Literal, Mapping, Sequence

__all__ = [
    "CUBE_NET_PATTERNS",
    "DIRECTIONS",
    "Direction",
    "NetPattern",
    "PatternLink",
    "opposite",
    "pattern_by_id",
]


Direction = Literal["up", "down", "left", "right"]

# Edge order used whenever a face's boundary is walked: top, right, bottom, left.
DIRECTIONS: tuple[Direction, ...] = ("up", "right", "down", "left")

_OPPOSITES: dict[str, Direction] = {
    "up": "down",
    "down": "up",
    "left": "right",
    "right": "left",
}


def opposite(direction: str) -> Direction:
    """Return the direction pointing back across the same edge."""

    try:
        return _OPPOSITES[direction]
    except KeyError as exc:
        raise ValueError(f"Unknown direction {direction!r}.") from exc


@dataclass(frozen=True, slots=True)
class PatternLink:
    """Attachment of face ``to_id`` on the ``direction`` side of ``from_id``."""

    from_id: int
    to_id: int
    direction: str

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "PatternLink":
        for key in ("from", "to", "dir"):
            if key not in payload:
                raise KeyError(f"Pattern links require a {key!r} entry.")
        direction = str(payload["dir"])
        if direction not in _OPPOSITES:
            raise ValueError(f"Unknown link direction {direction!r}.")
        return cls(from_id=int(payload["from"]), to_id=int(payload["to"]), direction=direction)

    def to_mapping(self) -> dict[str, object]:
        return {"from": self.from_id, "to": self.to_id, "dir": self.direction}


@dataclass(frozen=True, slots=True)
class NetPattern:
    """A face-attachment tree rooted at face ``0``.

    ``structure`` is authored so that every link's parent face is attached by
    an earlier link (or is the root).
    """

    id: int
    structure: tuple[PatternLink, ...]
    name: str | None = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "NetPattern":
        if "id" not in payload:
            raise KeyError("Net patterns require an 'id'.")
        raw_links = payload.get("structure")
        if not isinstance(raw_links, Sequence) or isinstance(raw_links, (str, bytes)):
            raise TypeError("Net pattern 'structure' must be a list of links.")
        name = payload.get("name")
        return cls(
            id=int(payload["id"]),
            structure=tuple(PatternLink.from_mapping(link) for link in raw_links),
            name=str(name) if name is not None else None,
        )

    @classmethod
    def build(
        cls,
        pattern_id: int,
        links: Iterable[tuple[int, int, str]],
        *,
        name: str | None = None,
    ) -> "NetPattern":
        return cls(
            id=pattern_id,
            structure=tuple(PatternLink(src, dst, direction) for src, dst, direction in links),
            name=name,
        )

    @property
    def face_ids(self) -> tuple[int, ...]:
        ids = [0]
        for link in self.structure:
            for face_id in (link.from_id, link.to_id):
                if face_id not in ids:
                    ids.append(face_id)
        return tuple(ids)

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "structure": [link.to_mapping() for link in self.structure],
        }
        if self.name is not None:
            data["name"] = self.name
        return data


# The 11 canonical cube nets, grouped by the length of their longest row.
CUBE_NET_PATTERNS: tuple[NetPattern, ...] = (
    # 1-4-1: a strip of four faces 0-1-2-3 with one face above and one below.
    NetPattern.build(
        1,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (0, 4, "up"), (0, 5, "down")],
        name="T",
    ),
    NetPattern.build(
        2,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (1, 4, "down"), (0, 5, "up")],
        name="offset T",
    ),
    NetPattern.build(
        3,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (0, 4, "up"), (2, 5, "down")],
        name="split",
    ),
    NetPattern.build(
        4,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (0, 4, "up"), (3, 5, "down")],
        name="hooks",
    ),
    NetPattern.build(
        5,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (1, 4, "up"), (1, 5, "down")],
        name="cross",
    ),
    NetPattern.build(
        6,
        [(0, 1, "right"), (1, 2, "right"), (2, 3, "right"), (1, 4, "up"), (2, 5, "down")],
        name="long cross",
    ),
    # 2-3-1: a middle row of three faces.
    NetPattern.build(
        7,
        [(0, 1, "left"), (0, 2, "right"), (1, 3, "up"), (3, 4, "left"), (2, 5, "down")],
        name="S-bone",
    ),
    NetPattern.build(
        8,
        [(0, 1, "right"), (1, 2, "right"), (0, 3, "up"), (3, 4, "left"), (0, 5, "down")],
        name="duck",
    ),
    NetPattern.build(
        9,
        [(0, 1, "right"), (1, 2, "right"), (0, 3, "up"), (3, 4, "left"), (1, 5, "down")],
        name="stepped S-bone",
    ),
    # 3-3: two rows of three sharing a single column.
    NetPattern.build(
        10,
        [(0, 1, "left"), (1, 2, "left"), (0, 3, "down"), (3, 4, "right"), (4, 5, "right")],
        name="two rows",
    ),
    # 2-2-2
    NetPattern.build(
        11,
        [(0, 1, "right"), (1, 2, "down"), (2, 3, "right"), (3, 4, "down"), (4, 5, "right")],
        name="stairs",
    ),
)


def pattern_by_id(
    pattern_id: int,
    patterns: Iterable[NetPattern] = CUBE_NET_PATTERNS,
) -> NetPattern:
    """Return the pattern with *pattern_id* from *patterns*."""

    for pattern in patterns:
        if pattern.id == pattern_id:
            return pattern
    raise KeyError(f"Unknown net pattern: {pattern_id}")
