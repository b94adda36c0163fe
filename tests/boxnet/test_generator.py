"""Tests for net generation and enumeration."""

from __future__ import annotations

from collections import Counter
from itertools import combinations

import pytest

from boxnet.catalog import NetPattern, pattern_by_id
from boxnet.generator import Dimensions, GeneratorSettings, generate_all_nets, generate_net
from boxnet.net_model import NetData
from boxnet.overlap import Rect, rectangles_overlap


def _rect(face) -> Rect:
    return Rect(face.x, face.y, face.width, face.height)


def _check_net_invariants(net: NetData) -> None:
    faces = net.faces
    assert len(faces) == 6

    for a, b in combinations(faces, 2):
        assert not rectangles_overlap(_rect(a), _rect(b), epsilon=1e-9), (net.id, a.id, b.id)

    assert min(face.x for face in faces) == 0
    assert min(face.y for face in faces) == 0
    assert max(face.x + face.width for face in faces) == pytest.approx(net.total_width)
    assert max(face.y + face.height for face in faces) == pytest.approx(net.total_height)

    assert sorted(face.side_id for face in faces) == [0, 1, 2, 3, 4, 5]

    assert len(net.edge_matches) == 7
    assert sorted(match.match_id for match in net.edge_matches) == list(range(7))
    for match in net.edge_matches:
        assert net.face(match.face1_id).edge_match_ids[match.edge1] == match.match_id
        assert net.face(match.face2_id).edge_match_ids[match.edge2] == match.match_id


def test_dimensions_reject_non_positive_values() -> None:
    with pytest.raises(ValueError):
        Dimensions(1, 0, 2)
    with pytest.raises(ValueError):
        Dimensions(-1, 2, 2)


def test_dimensions_from_mapping_and_sequence() -> None:
    assert Dimensions.from_value({"l": 2, "w": 3, "h": 4}) == Dimensions(2, 3, 4)
    assert Dimensions.from_value([2, 3, 4]) == Dimensions(2, 3, 4)
    with pytest.raises(KeyError):
        Dimensions.from_value({"l": 2, "w": 3})
    with pytest.raises(ValueError):
        Dimensions.from_value([1, 2])


def test_dimensions_permutations_order() -> None:
    assert Dimensions(2, 3, 4).permutations() == (
        (2, 3, 4),
        (2, 4, 3),
        (3, 2, 4),
        (3, 4, 2),
        (4, 2, 3),
        (4, 3, 2),
    )


def test_settings_validate_tolerances() -> None:
    with pytest.raises(ValueError):
        GeneratorSettings(overlap_epsilon=-0.1)
    with pytest.raises(ValueError):
        GeneratorSettings(coordinate_quantum=0)


def test_t_pattern_scenario(t_net: NetData) -> None:
    root = t_net.face(0)
    strip = [t_net.face(face_id) for face_id in (0, 1, 2, 3)]

    assert t_net.id == "1-1"
    assert (root.width, root.height) == (2, 3)
    assert root.is_base and root.parent_id is None and root.attach_dir is None
    assert (t_net.face(1).width, t_net.face(1).height) == (4, 3)
    assert t_net.face(1).parent_id == 0 and t_net.face(1).attach_dir == "right"
    assert t_net.total_width == sum(face.width for face in strip) == 12
    assert t_net.total_height == 11
    assert (t_net.min_x, t_net.min_y) == (0, -4)
    assert root.y == 4
    assert [face.side_id for face in t_net.faces] == [1, 5, 0, 4, 2, 3]
    assert len(t_net.edge_matches) == 7


@pytest.mark.parametrize("size", [1, 2, 3, 5, 0.5])
def test_cube_yields_one_net_per_pattern(size: float) -> None:
    nets = generate_all_nets(Dimensions.cube(size), True)

    assert len(nets) == 11
    assert [net.id for net in nets] == [f"{pattern_id}-1" for pattern_id in range(1, 12)]
    for net in nets:
        _check_net_invariants(net)


@pytest.mark.parametrize(
    "dimensions",
    [
        {"l": 2, "w": 3, "h": 4},
        (1, 1, 2),
        (1, 2, 3),
        (1, 5, 9),
        (0.5, 3, 7),
    ],
)
def test_cuboid_enumerates_every_permutation(dimensions) -> None:
    nets = generate_all_nets(dimensions, False)

    assert len(nets) <= 66
    per_pattern = Counter(net.pattern_id for net in nets)
    assert set(per_pattern) == set(range(1, 12))
    assert all(count == 6 for count in per_pattern.values())
    # Each pattern's rows stack in separate bands, so no permutation collides.
    assert len(nets) == 66
    keys = [(net.pattern_id, net.variant_index) for net in nets]
    assert keys == sorted(keys)
    for net in nets:
        _check_net_invariants(net)


def test_cuboid_variants_are_distinct_layouts() -> None:
    nets = [net for net in generate_all_nets((1, 2, 3), False) if net.pattern_id == 5]

    sizes = {(net.total_width, net.total_height) for net in nets}
    assert len(nets) == 6
    assert len(sizes) > 1


def test_generation_is_deterministic() -> None:
    first = generate_all_nets((2, 3, 5), False)
    second = generate_all_nets((2, 3, 5), False)

    assert [net.to_mapping() for net in first] == [net.to_mapping() for net in second]


def test_infeasible_pattern_is_dropped_from_enumeration() -> None:
    looping = NetPattern.build(
        42,
        [(0, 1, "right"), (1, 2, "down"), (2, 3, "left"), (3, 4, "up"), (0, 5, "left")],
    )

    assert generate_net(looping, (1, 1, 1)) is None
    nets = generate_all_nets((1, 1, 1), True, patterns=[looping, pattern_by_id(1)])
    assert [net.pattern_id for net in nets] == [1]


def test_malformed_pattern_yields_no_net() -> None:
    broken = NetPattern.build(43, [(0, 1, "right"), (9, 2, "down")])

    assert generate_net(broken, (1, 1, 1)) is None


def test_net_payload_is_json_friendly(t_net: NetData) -> None:
    payload = t_net.to_mapping()

    assert payload["id"] == "1-1"
    assert len(payload["faces"]) == 6
    assert "parent_id" not in payload["faces"][0]
    assert payload["faces"][1]["attach_dir"] == "right"
    assert len(payload["edge_matches"]) == 7


def test_dimensions_detect_cubes() -> None:
    assert Dimensions.cube(2).is_cube
    assert Dimensions(2.0, 2, 2).is_cube
    assert not Dimensions(2, 2, 3).is_cube


def test_edge_stamps_are_read_only(t_net: NetData) -> None:
    match = t_net.edge_matches[0]
    face = t_net.face(match.face1_id)

    with pytest.raises(TypeError):
        face.edge_match_ids[match.edge1] = 99  # type: ignore[index]

    assert face.edge_match_ids[match.edge1] == match.match_id


def test_generated_nets_are_hashable(t_net: NetData) -> None:
    again = generate_net(pattern_by_id(1), (2, 3, 4))

    assert again == t_net
    assert hash(again) == hash(t_net)
    assert len({t_net, again}) == 1
