"""Command line helpers for listing and exporting box nets."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from .generator import Dimensions, generate_all_nets
from .net_model import NetData

__all__ = ["build_cli", "list_nets", "export_net"]


def _add_box_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--cube", type=float, metavar="SIZE", help="Edge length of a cube.")
    group.add_argument(
        "--cuboid",
        type=float,
        nargs=3,
        metavar=("L", "W", "H"),
        help="Length, width and height of a cuboid.",
    )
    parser.add_argument(
        "--patterns",
        type=Path,
        help="Optional JSON or YAML pattern catalog replacing the built-in cube nets.",
    )


def _generate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> list[NetData]:
    try:
        if args.cube is not None:
            dimensions = Dimensions.cube(args.cube)
        else:
            dimensions = Dimensions(*args.cuboid)
    except ValueError as exc:
        parser.error(str(exc))

    patterns = None
    if args.patterns is not None:
        from schemas.validators import load_pattern_catalog

        patterns = load_pattern_catalog(args.patterns)
    # A cuboid with three equal sides has only one distinct unfolding per pattern.
    return generate_all_nets(dimensions, dimensions.is_cube, patterns=patterns)


def list_nets(nets: Sequence[NetData], *, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([net.to_mapping() for net in nets], indent=2))
        return
    print(f"{len(nets)} net(s)")
    for net in nets:
        print(
            f"{net.id:>6}  pattern {net.pattern_id:>2}  variant {net.variant_index}  "
            f"{net.total_width:g} x {net.total_height:g}  {len(net.edge_matches)} edge matches"
        )


def export_net(
    net: NetData,
    *,
    output_dir: Path,
    formats: Sequence[str],
    scale: float,
    color_pairs: bool,
) -> dict[str, Path]:
    from exporters.net_svg import NetExporter

    exporter = NetExporter(scale=scale, color_parallel_pairs=color_pairs)
    return exporter.export(net, output_dir=output_dir, formats=formats)


def build_cli(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Enumerate and export nets of rectangular boxes.")
    parser.add_argument("--verbose", action="store_true", help="Log dropped layouts at DEBUG level.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List every feasible net for a box.")
    _add_box_arguments(list_parser)
    list_parser.add_argument("--json", action="store_true", help="Print full net payloads as JSON.")

    export_parser = subparsers.add_parser("export", help="Write one net as SVG, DXF or JSON.")
    _add_box_arguments(export_parser)
    export_parser.add_argument(
        "--net",
        required=True,
        help="Identifier of the net to export, as printed by 'list' (e.g. 1-1).",
    )
    export_parser.add_argument(
        "--output",
        type=Path,
        default=Path("exports/nets"),
        help="Directory where exported files will be stored.",
    )
    export_parser.add_argument(
        "--formats",
        nargs="+",
        choices=("svg", "dxf", "json"),
        default=["svg", "json"],
        help="One or more formats to export (default: svg json).",
    )
    export_parser.add_argument(
        "--scale", type=float, default=40.0, help="Pixels per box unit in drawings."
    )
    export_parser.add_argument(
        "--color-pairs",
        action="store_true",
        help="Fill opposite box sides with a shared colour.",
    )

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    nets = _generate(args, parser)

    if args.command == "list":
        list_nets(nets, as_json=args.json)
        return 0

    if args.command == "export":
        selected = next((net for net in nets if net.id == args.net), None)
        if selected is None:
            print(f"No net with id {args.net!r}; run 'list' to see the available nets.")
            return 1
        created = export_net(
            selected,
            output_dir=args.output,
            formats=args.formats,
            scale=args.scale,
            color_pairs=args.color_pairs,
        )
        for fmt, path in created.items():
            print(f"Wrote {fmt.upper()} net to {path}")
        return 0

    parser.error(f"Unknown command: {args.command}")
    return 0
