"""Generate, fold and compare nets of rectangular boxes."""

from __future__ import annotations

from importlib import import_module

__all__ = [
    "CUBE_NET_PATTERNS",
    "Dimensions",
    "EdgeMatch",
    "Face",
    "FaceFrame",
    "FoldedNet",
    "GeneratorSettings",
    "InfeasibleLayoutError",
    "MalformedPatternError",
    "NetAlignment",
    "NetComparison",
    "NetData",
    "NetGenerationError",
    "NetPattern",
    "PatternLink",
    "compare_nets",
    "fit_scale",
    "fold_net",
    "generate_all_nets",
    "generate_net",
    "net_alignment",
    "propagate_frames",
]

_ATTRIBUTE_MODULES: dict[str, str] = {
    "CUBE_NET_PATTERNS": ".catalog",
    "NetPattern": ".catalog",
    "PatternLink": ".catalog",
    "Dimensions": ".generator",
    "GeneratorSettings": ".generator",
    "generate_all_nets": ".generator",
    "generate_net": ".generator",
    "EdgeMatch": ".net_model",
    "Face": ".net_model",
    "NetData": ".net_model",
    "FaceFrame": ".frames",
    "InfeasibleLayoutError": ".frames",
    "MalformedPatternError": ".frames",
    "NetGenerationError": ".frames",
    "propagate_frames": ".frames",
    "FoldedNet": ".folding",
    "fold_net": ".folding",
    "NetAlignment": ".alignment",
    "net_alignment": ".alignment",
    "NetComparison": ".comparison",
    "compare_nets": ".comparison",
    "fit_scale": ".presentation",
}


def __getattr__(name: str):
    try:
        module_name = _ATTRIBUTE_MODULES[name]
    except KeyError as exc:  # pragma: no cover
        raise AttributeError(f"module 'boxnet' has no attribute {name!r}") from exc

    module = import_module(module_name, __name__)
    value = getattr(module, name)
    globals()[name] = value
    return value


def __dir__() -> list[str]:  # pragma: no cover - interactive helper
    return sorted(__all__)
