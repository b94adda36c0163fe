"""3D geometry of a net part-way through folding into its box."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .net_model import Face, NetData

__all__ = ["FoldedFace", "FoldedNet", "fold_angle", "fold_net"]


MAX_FOLD_PROGRESS = 100.0


@dataclass(frozen=True, slots=True)
class FoldedFace:
    """Corners of a face in net units: top-left, top-right, bottom-right, bottom-left."""

    face_id: int
    corners: np.ndarray
    normal: np.ndarray


@dataclass(frozen=True, slots=True)
class FoldedNet:
    """All faces of a net at one fold progress value."""

    net_id: str
    progress: float
    angle: float
    faces: tuple[FoldedFace, ...]

    def face(self, face_id: int) -> FoldedFace:
        for face in self.faces:
            if face.face_id == face_id:
                return face
        raise KeyError(f"Folded net {self.net_id} has no face {face_id}")

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        points = np.concatenate([face.corners for face in self.faces], axis=0)
        return points.min(axis=0), points.max(axis=0)


@dataclass(frozen=True, slots=True)
class _Hinge:
    origin: np.ndarray
    right: np.ndarray
    down: np.ndarray
    normal: np.ndarray
    width: float
    height: float

    def corners(self) -> np.ndarray:
        c0 = self.origin
        c1 = c0 + self.right * self.width
        c2 = c1 + self.down * self.height
        c3 = c0 + self.down * self.height
        return np.stack([c0, c1, c2, c3])


def fold_angle(progress: float) -> float:
    """Return the hinge angle in degrees for a progress value in ``[0, 100]``."""

    clamped = min(max(float(progress), 0.0), MAX_FOLD_PROGRESS)
    if clamped >= MAX_FOLD_PROGRESS:
        return 90.0
    return clamped * 0.9


def _fold_child(parent: _Hinge, child: Face, angle: float) -> _Hinge:
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    direction = child.attach_dir
    if direction == "right":
        right = cos_a * parent.right + sin_a * parent.normal
        normal = cos_a * parent.normal - sin_a * parent.right
        origin = parent.origin + parent.right * parent.width
        return _Hinge(origin, right, parent.down, normal, child.width, child.height)
    if direction == "left":
        right = cos_a * parent.right - sin_a * parent.normal
        normal = cos_a * parent.normal + sin_a * parent.right
        origin = parent.origin - right * child.width
        return _Hinge(origin, right, parent.down, normal, child.width, child.height)
    if direction == "down":
        down = cos_a * parent.down + sin_a * parent.normal
        normal = cos_a * parent.normal - sin_a * parent.down
        origin = parent.origin + parent.down * parent.height
        return _Hinge(origin, parent.right, down, normal, child.width, child.height)
    if direction == "up":
        down = cos_a * parent.down - sin_a * parent.normal
        normal = cos_a * parent.normal + sin_a * parent.down
        origin = parent.origin - down * child.height
        return _Hinge(origin, parent.right, down, normal, child.width, child.height)
    raise ValueError(f"Face {child.id} has no usable attachment direction: {direction!r}")


def fold_net(net: NetData, progress: float) -> FoldedNet:
    """Rotate every face about its hinge by the angle for *progress*.

    The root face stays in the ``z = 0`` plane with its top-left corner at the
    origin. At full progress each face coincides with the box side it was
    unfolded from.
    """

    root = net.root_face
    if root is None:
        return FoldedNet(net.id, float(progress), 0.0, ())

    degrees = fold_angle(progress)
    angle = math.radians(degrees)
    hinges: dict[int, _Hinge] = {
        root.id: _Hinge(
            origin=np.zeros(3),
            right=np.array([1.0, 0.0, 0.0]),
            down=np.array([0.0, 1.0, 0.0]),
            normal=np.array([0.0, 0.0, -1.0]),
            width=root.width,
            height=root.height,
        )
    }
    queue = [root.id]
    while queue:
        parent_id = queue.pop(0)
        for child in net.children(parent_id):
            if child.id in hinges:
                continue
            hinges[child.id] = _fold_child(hinges[parent_id], child, angle)
            queue.append(child.id)

    faces = tuple(
        FoldedFace(face_id=face.id, corners=hinges[face.id].corners(), normal=hinges[face.id].normal)
        for face in net.faces
        if face.id in hinges
    )
    return FoldedNet(net_id=net.id, progress=float(progress), angle=degrees, faces=faces)
