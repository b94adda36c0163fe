from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from boxnet.__main__ import main


def test_list_cube_nets(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--cube", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "11 net(s)"
    assert len(lines) == 12
    assert lines[1].split()[0] == "1-1"


def test_list_cuboid_as_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--cuboid", "2", "3", "4", "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert len(payload) == 66
    assert payload[0]["id"] == "1-1"
    assert payload[-1]["id"] == "11-6"


def test_box_arguments_are_required() -> None:
    with pytest.raises(SystemExit):
        main(["list"])
    with pytest.raises(SystemExit):
        main(["list", "--cube", "2", "--cuboid", "1", "2", "3"])


def test_export_writes_files(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        [
            "export",
            "--cuboid",
            "2",
            "3",
            "4",
            "--net",
            "5-2",
            "--output",
            str(tmp_path),
            "--formats",
            "svg",
            "dxf",
        ]
    )

    assert exit_code == 0
    assert (tmp_path / "net_5-2.svg").exists()
    assert (tmp_path / "net_5-2.dxf").exists()
    assert not (tmp_path / "net_5-2.json").exists()
    assert "Wrote SVG net to" in capsys.readouterr().out


def test_export_unknown_net(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["export", "--cube", "1", "--net", "1-2", "--output", str(tmp_path)])

    assert exit_code == 1
    assert "No net with id '1-2'" in capsys.readouterr().out
    assert not list(tmp_path.iterdir())


def test_custom_pattern_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    catalog = {
        "patterns": [
            {
                "id": 1,
                "name": "cross",
                "structure": [
                    {"from": 0, "to": 1, "dir": "right"},
                    {"from": 1, "to": 2, "dir": "right"},
                    {"from": 2, "to": 3, "dir": "right"},
                    {"from": 1, "to": 4, "dir": "up"},
                    {"from": 1, "to": 5, "dir": "down"},
                ],
            }
        ]
    }
    path = tmp_path / "patterns.yaml"
    path.write_text(yaml.safe_dump(catalog), encoding="utf-8")

    assert main(["list", "--cube", "1", "--patterns", str(path)]) == 0

    assert capsys.readouterr().out.splitlines()[0] == "1 net(s)"


@pytest.mark.parametrize(
    "box",
    [["--cube", "0"], ["--cube", "-2"], ["--cuboid", "2", "-3", "4"]],
)
def test_non_positive_dimensions_are_argument_errors(
    box: list[str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["list", *box])

    assert excinfo.value.code == 2
    assert "must be positive" in capsys.readouterr().err


def test_cuboid_with_equal_sides_lists_cube_nets(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["list", "--cuboid", "2", "2", "2"]) == 0

    assert capsys.readouterr().out.splitlines()[0] == "11 net(s)"
