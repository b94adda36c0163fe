"""Exporter utilities for flattened box nets."""

from .net_svg import NetExporter, face_segments

__all__ = ["NetExporter", "face_segments"]
