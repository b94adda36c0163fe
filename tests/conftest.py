from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

for path in (ROOT, SRC):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from boxnet.catalog import CUBE_NET_PATTERNS, pattern_by_id  # noqa: E402
from boxnet.generator import generate_net  # noqa: E402
from boxnet.net_model import NetData  # noqa: E402


@pytest.fixture()
def t_net() -> NetData:
    """Pattern 1 (the T) unfolded from a 2 x 3 x 4 box."""

    net = generate_net(pattern_by_id(1), (2, 3, 4), variant_index=1)
    assert net is not None
    return net


@pytest.fixture()
def unit_cube_nets() -> list[NetData]:
    nets = [generate_net(pattern, (1, 1, 1)) for pattern in CUBE_NET_PATTERNS]
    assert all(net is not None for net in nets)
    return nets  # type: ignore[return-value]
