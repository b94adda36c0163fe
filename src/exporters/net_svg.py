"""Utilities for exporting flattened box nets as drawings and reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping

from boxnet.catalog import DIRECTIONS, opposite
from boxnet.net_model import Face, NetData
from boxnet.presentation import (
    SIDE_PAIR_COLORS,
    dice_value,
    is_fold_line,
    match_color,
    parallel_pair,
)

__all__ = ["NetExporter", "face_segments"]


def face_segments(face: Face) -> dict[str, tuple[tuple[float, float], tuple[float, float]]]:
    """Return each flat edge of *face* in net units, walking clockwise."""

    left, top = face.x, face.y
    right, bottom = face.x + face.width, face.y + face.height
    segments = (
        ((left, top), (right, top)),
        ((right, top), (right, bottom)),
        ((right, bottom), (left, bottom)),
        ((left, bottom), (left, top)),
    )
    return dict(zip(DIRECTIONS, segments))


class NetExporter:
    """Export a generated net to SVG, DXF or JSON files."""

    def __init__(
        self,
        *,
        scale: float = 40.0,
        show_edge_matches: bool = True,
        color_parallel_pairs: bool = False,
    ) -> None:
        if scale <= 0:
            raise ValueError("Export scale must be positive.")
        self.scale = float(scale)
        self.show_edge_matches = bool(show_edge_matches)
        self.color_parallel_pairs = bool(color_parallel_pairs)

    def export(
        self,
        net: NetData,
        *,
        output_dir: Path | str,
        formats: Iterable[str] = ("svg", "json"),
        metadata: Mapping[str, Any] | None = None,
    ) -> dict[str, Path]:
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        combined_metadata: dict[str, Any] = {
            "scale": self.scale,
            "net_id": net.id,
            "edge_match_count": len(net.edge_matches),
        }
        if metadata:
            combined_metadata.update(metadata)

        created: dict[str, Path] = {}
        for fmt in formats:
            normalized = fmt.lower()
            path = output_path / f"net_{net.id}.{normalized}"
            if normalized == "svg":
                self._write_svg(path, net, combined_metadata)
            elif normalized == "dxf":
                self._write_dxf(path, net, combined_metadata)
            elif normalized == "json":
                _write_json(path, net, combined_metadata)
            else:
                raise ValueError(f"Unsupported net export format: {fmt}")
            created[normalized] = path
        return created

    def _face_fill(self, face: Face) -> str:
        if self.color_parallel_pairs:
            return SIDE_PAIR_COLORS[parallel_pair(face)]
        return "#ffffff"

    def _write_svg(self, path: Path, net: NetData, metadata: Mapping[str, Any]) -> None:
        s = self.scale
        width = net.total_width * s
        height = net.total_height * s
        lines = [
            "<?xml version=\"1.0\" encoding=\"UTF-8\"?>",
            f"<!-- Net: {_escape_svg_text(str(metadata['net_id']))} -->",
            f"<!-- Scale: {metadata['scale']} -->",
            f"<svg xmlns=\"http://www.w3.org/2000/svg\" width=\"{width:.2f}\" height=\"{height:.2f}\" viewBox=\"0 0 {width:.2f} {height:.2f}\">",
            "  <style>",
            "    .net-face { stroke: none; }",
            "    .net-cut { stroke: #000; stroke-linecap: square; }",
            "    .net-fold { stroke: #000; stroke-dasharray: 6 4; }",
            "    .net-match { stroke-linecap: square; }",
            "    .net-label { font-family: sans-serif; font-weight: 900; fill: #334155; text-anchor: middle; dominant-baseline: central; }",
            "  </style>",
        ]
        stroke = max(0.5, s / 40)
        for face in net.faces:
            lines.append(
                f"  <rect id=\"face-{face.id}\" class=\"net-face\" x=\"{face.x * s:.2f}\" y=\"{face.y * s:.2f}\" "
                f"width=\"{face.width * s:.2f}\" height=\"{face.height * s:.2f}\" fill=\"{self._face_fill(face)}\" "
                f"data-side-id=\"{face.side_id}\" />"
            )
        for face in net.faces:
            for direction, ((x1, y1), (x2, y2)) in face_segments(face).items():
                coords = f"x1=\"{x1 * s:.2f}\" y1=\"{y1 * s:.2f}\" x2=\"{x2 * s:.2f}\" y2=\"{y2 * s:.2f}\""
                match_id = face.edge_match_ids.get(direction)
                if self.show_edge_matches and match_id is not None:
                    lines.append(
                        f"  <line class=\"net-match\" data-match-id=\"{match_id}\" {coords} "
                        f"stroke=\"{match_color(match_id)}\" stroke-width=\"{5 * stroke:.2f}\" />"
                    )
                elif is_fold_line(net, face, direction):
                    # Each hinge is shared by two faces; draw it from the child only.
                    if face.attach_dir is None or direction != opposite(face.attach_dir):
                        continue
                    lines.append(
                        f"  <line class=\"net-fold\" {coords} stroke-width=\"{1.5 * stroke:.2f}\" />"
                    )
                else:
                    lines.append(
                        f"  <line class=\"net-cut\" {coords} stroke-width=\"{3.5 * stroke:.2f}\" />"
                    )
        for face in net.faces:
            cx, cy = face.center
            size = min(face.width, face.height) * s * 0.5
            lines.append(
                f"  <text class=\"net-label\" x=\"{cx * s:.2f}\" y=\"{cy * s:.2f}\" font-size=\"{size:.2f}\">{dice_value(face)}</text>"
            )
        lines.append("</svg>")
        path.write_text("\n".join(lines), encoding="utf-8")

    def _write_dxf(self, path: Path, net: NetData, metadata: Mapping[str, Any]) -> None:
        lines = [
            "0",
            "SECTION",
            "2",
            "HEADER",
            "9",
            "$BOXNET_SCALE",
            "1",
            str(metadata["scale"]),
            "0",
            "ENDSEC",
            "0",
            "SECTION",
            "2",
            "ENTITIES",
        ]
        s = self.scale
        for face in net.faces:
            for direction, ((x1, y1), (x2, y2)) in face_segments(face).items():
                if is_fold_line(net, face, direction):
                    if face.attach_dir is None or direction != opposite(face.attach_dir):
                        continue
                    layer = "FOLD"
                else:
                    layer = "CUT"
                # Flip y so the drawing reads the same way up in CAD tools.
                lines.extend([
                    "0",
                    "LINE",
                    "8",
                    layer,
                    "10",
                    f"{x1 * s:.4f}",
                    "20",
                    f"{-y1 * s:.4f}",
                    "11",
                    f"{x2 * s:.4f}",
                    "21",
                    f"{-y2 * s:.4f}",
                ])
        lines.extend(["0", "ENDSEC", "0", "EOF"])
        path.write_text("\n".join(lines), encoding="utf-8")


def _write_json(path: Path, net: NetData, metadata: Mapping[str, Any]) -> None:
    payload = {"metadata": dict(metadata), "net": net.to_mapping()}
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def _escape_svg_text(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )
