from __future__ import annotations

import numpy as np
import pytest

from boxnet.catalog import pattern_by_id
from boxnet.folding import fold_angle, fold_net
from boxnet.frames import propagate_frames
from boxnet.net_model import NetData


@pytest.mark.parametrize(
    ("progress", "expected"),
    [(-10, 0.0), (0, 0.0), (50, 45.0), (99.9, pytest.approx(89.91)), (100, 90.0), (150, 90.0)],
)
def test_fold_angle_is_clamped(progress: float, expected: float) -> None:
    assert fold_angle(progress) == expected


def test_flat_net_matches_layout(t_net: NetData) -> None:
    folded = fold_net(t_net, 0)
    root = t_net.face(0)

    assert folded.angle == 0.0
    for face in t_net.faces:
        corners = folded.face(face.id).corners
        x0, y0 = face.x - root.x, face.y - root.y
        expected = np.array(
            [
                [x0, y0, 0.0],
                [x0 + face.width, y0, 0.0],
                [x0 + face.width, y0 + face.height, 0.0],
                [x0, y0 + face.height, 0.0],
            ]
        )
        np.testing.assert_allclose(corners, expected, atol=1e-9)


def test_full_fold_closes_the_box(t_net: NetData) -> None:
    folded = fold_net(t_net, 100)
    frames = propagate_frames(pattern_by_id(1), (2, 3, 4)).frames

    for face in t_net.faces:
        np.testing.assert_allclose(
            folded.face(face.id).corners, np.stack(frames[face.id].corners()), atol=1e-9
        )

    low, high = folded.bounds()
    np.testing.assert_allclose(low, [0, 0, -4], atol=1e-9)
    np.testing.assert_allclose(high, [2, 3, 0], atol=1e-9)


def test_matched_edges_meet_when_folded(t_net: NetData) -> None:
    folded = fold_net(t_net, 100)
    edge_corners = {"up": (0, 1), "right": (1, 2), "down": (2, 3), "left": (3, 0)}

    def endpoints(face_id: int, edge: str) -> set[tuple[float, ...]]:
        corners = folded.face(face_id).corners
        return {tuple(np.round(corners[i], 6) + 0.0) for i in edge_corners[edge]}

    for match in t_net.edge_matches:
        assert endpoints(match.face1_id, match.edge1) == endpoints(match.face2_id, match.edge2)


def test_half_fold_lifts_children_off_the_plane(t_net: NetData) -> None:
    folded = fold_net(t_net, 50)

    np.testing.assert_allclose(folded.face(0).corners[:, 2], 0.0)
    assert np.min(folded.face(1).corners[:, 2]) < 0


def test_unknown_face_lookup_raises(t_net: NetData) -> None:
    with pytest.raises(KeyError):
        fold_net(t_net, 10).face(42)
