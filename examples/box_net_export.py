"""Example configuration for exporting box nets."""

from __future__ import annotations

from pathlib import Path

from boxnet.generator import Dimensions, generate_all_nets
from exporters.net_svg import NetExporter


def example_cube_export(base_dir: Path) -> dict[str, Path]:
    """Export the cross-shaped net of a 3 unit cube with coloured side pairs."""

    nets = generate_all_nets(Dimensions.cube(3), True)
    cross = next(net for net in nets if net.pattern_id == 5)

    exporter = NetExporter(scale=30, color_parallel_pairs=True)
    return exporter.export(cross, output_dir=base_dir / "cube", formats=["svg", "json"])


def example_cuboid_export(base_dir: Path) -> dict[str, dict[str, Path]]:
    """Export every unfolding of a 2 x 3 x 5 cuboid as SVG and DXF."""

    dimensions = Dimensions(2, 3, 5)
    exporter = NetExporter(scale=20)
    return {
        net.id: exporter.export(
            net,
            output_dir=base_dir / "cuboid",
            formats=["svg", "dxf"],
            metadata={"dimensions": dimensions.to_mapping()},
        )
        for net in generate_all_nets(dimensions, False)
    }


if __name__ == "__main__":  # pragma: no cover - example script
    base = Path("exports/nets/examples")
    print("cube ->", {fmt: str(path) for fmt, path in example_cube_export(base).items()})
    cuboid = example_cuboid_export(base)
    print("cuboid ->", f"{len(cuboid)} nets written to {base / 'cuboid'}")
