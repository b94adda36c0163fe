from __future__ import annotations

import pytest

from boxnet.overlap import Rect, find_overlap, rectangles_overlap


def test_shared_edge_is_not_an_overlap() -> None:
    assert not rectangles_overlap(Rect(0, 0, 2, 3), Rect(2, 0, 4, 3))
    assert not rectangles_overlap(Rect(0, 0, 2, 3), Rect(0, 3, 2, 4))


def test_shared_corner_is_not_an_overlap() -> None:
    assert not rectangles_overlap(Rect(0, 0, 1, 1), Rect(1, 1, 1, 1))


def test_stacked_faces_overlap() -> None:
    assert rectangles_overlap(Rect(0, 0, 1, 1), Rect(0, 0, 1, 1))
    assert rectangles_overlap(Rect(0, 0, 2, 2), Rect(1, 1, 2, 2))


@pytest.mark.parametrize("intrusion", [0.01, 0.04])
def test_intrusion_below_epsilon_is_tolerated(intrusion: float) -> None:
    assert not rectangles_overlap(Rect(0, 0, 1, 1), Rect(1 - intrusion, 0, 1, 1))


def test_intrusion_beyond_epsilon_overlaps() -> None:
    assert rectangles_overlap(Rect(0, 0, 1, 1), Rect(0.9, 0, 1, 1))
    assert rectangles_overlap(Rect(0, 0, 1, 1), Rect(0.99, 0, 1, 1), epsilon=0.0)


def test_find_overlap_reports_first_collision() -> None:
    placed = [(0, Rect(0, 0, 1, 1)), (1, Rect(1, 0, 1, 1)), (2, Rect(2, 0, 1, 1))]

    assert find_overlap(Rect(1.5, 0, 1, 1), placed) == 1
    assert find_overlap(Rect(0, 1, 3, 1), placed) is None


def test_shifted_rect() -> None:
    rect = Rect(1, 2, 3, 4).shifted(-1, -2)

    assert (rect.x, rect.y, rect.right, rect.bottom) == (0, 0, 3, 4)
