"""Immutable records describing a generated box net."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

__all__ = ["EdgeMatch", "Face", "NetData"]


@dataclass(frozen=True, slots=True)
class Face:
    """A single face of a flattened net."""

    id: int
    x: float
    y: float
    width: float
    height: float
    side_id: int
    parent_id: int | None = None
    attach_dir: str | None = None
    is_base: bool = False
    edge_match_ids: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Stamps are read-only once the face is built.
        object.__setattr__(self, "edge_match_ids", MappingProxyType(dict(self.edge_match_ids)))

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def to_mapping(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "side_id": self.side_id,
            "is_base": self.is_base,
            "edge_match_ids": dict(self.edge_match_ids),
        }
        if self.parent_id is not None:
            data["parent_id"] = self.parent_id
        if self.attach_dir is not None:
            data["attach_dir"] = self.attach_dir
        return data


@dataclass(frozen=True, slots=True)
class EdgeMatch:
    """Two open edges that become the same box edge once folded."""

    face1_id: int
    edge1: str
    face2_id: int
    edge2: str
    match_id: int

    def to_mapping(self) -> dict[str, Any]:
        return {
            "face1_id": self.face1_id,
            "edge1": self.edge1,
            "face2_id": self.face2_id,
            "edge2": self.edge2,
            "match_id": self.match_id,
        }


@dataclass(frozen=True, slots=True)
class NetData:
    """Result of unfolding one pattern with one starting permutation."""

    id: str
    pattern_id: int
    variant_index: int
    faces: tuple[Face, ...]
    total_width: float
    total_height: float
    min_x: float
    min_y: float
    edge_matches: tuple[EdgeMatch, ...]

    def face(self, face_id: int) -> Face:
        for face in self.faces:
            if face.id == face_id:
                return face
        raise KeyError(f"Net {self.id} has no face {face_id}")

    def children(self, face_id: int) -> tuple[Face, ...]:
        return tuple(face for face in self.faces if face.parent_id == face_id)

    @property
    def root_face(self) -> Face | None:
        for face in self.faces:
            if face.id == 0:
                return face
        return self.faces[0] if self.faces else None

    def to_mapping(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "pattern_id": self.pattern_id,
            "variant_index": self.variant_index,
            "faces": [face.to_mapping() for face in self.faces],
            "total_width": self.total_width,
            "total_height": self.total_height,
            "min_x": self.min_x,
            "min_y": self.min_y,
            "edge_matches": [match.to_mapping() for match in self.edge_matches],
        }
