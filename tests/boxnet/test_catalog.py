from __future__ import annotations

import pytest

from boxnet.catalog import (
    CUBE_NET_PATTERNS,
    DIRECTIONS,
    NetPattern,
    PatternLink,
    opposite,
    pattern_by_id,
)


def test_catalog_holds_the_eleven_cube_nets() -> None:
    assert [pattern.id for pattern in CUBE_NET_PATTERNS] == list(range(1, 12))
    assert len({pattern.name for pattern in CUBE_NET_PATTERNS}) == 11


@pytest.mark.parametrize("pattern", CUBE_NET_PATTERNS, ids=lambda pattern: str(pattern.id))
def test_each_pattern_is_a_spanning_tree(pattern: NetPattern) -> None:
    assert len(pattern.structure) == 5
    assert sorted(pattern.face_ids) == [0, 1, 2, 3, 4, 5]
    children = [link.to_id for link in pattern.structure]
    assert len(set(children)) == 5
    assert 0 not in children

    placed = {0}
    for link in pattern.structure:
        assert link.from_id in placed
        placed.add(link.to_id)


def test_opposite_directions() -> None:
    assert [opposite(direction) for direction in DIRECTIONS] == ["down", "left", "up", "right"]
    with pytest.raises(ValueError):
        opposite("north")


def test_pattern_round_trips_through_mapping() -> None:
    payload = pattern_by_id(7).to_mapping()

    assert payload["name"] == "S-bone"
    assert payload["structure"][0] == {"from": 0, "to": 1, "dir": "left"}
    assert NetPattern.from_mapping(payload) == pattern_by_id(7)


def test_link_from_mapping_validates_entries() -> None:
    assert PatternLink.from_mapping({"from": "0", "to": 1, "dir": "up"}) == PatternLink(0, 1, "up")
    with pytest.raises(KeyError):
        PatternLink.from_mapping({"from": 0, "dir": "up"})
    with pytest.raises(ValueError):
        PatternLink.from_mapping({"from": 0, "to": 1, "dir": "diagonal"})


def test_pattern_from_mapping_requires_a_link_list() -> None:
    with pytest.raises(KeyError):
        NetPattern.from_mapping({"structure": []})
    with pytest.raises(TypeError):
        NetPattern.from_mapping({"id": 1, "structure": "0-1"})


def test_pattern_lookup() -> None:
    assert pattern_by_id(11).name == "stairs"
    with pytest.raises(KeyError):
        pattern_by_id(12)
