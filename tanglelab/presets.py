"""Named option bundles. The registry is read-only; ``get_preset`` hands out deep copies."""

import copy
from types import MappingProxyType
from typing import Any, Dict, NamedTuple

from .geometry import Range


class Preset(NamedTuple):
    pattern: str
    options: Dict[str, Any]


PRESETS = MappingProxyType({
    "aahs": Preset("aahs", {
        "aah": {},
        "dot": {"size": Range(3, 6), "fill_color": 255},
    }),
    "aahs-outline": Preset("aahs", {
        "aah": {"fill_color": 255, "arm_count": 10},
        "dot": {"enable": False},
    }),
    "ambler": Preset("ambler", {}),
    "emingle": Preset("emingle", {"start_corner": "random"}),
    "huggins": Preset("huggins", {"grid": {"spacing": 40}}),
    "huggins-wave": Preset("huggins", {"grid": {"spacing": 50, "mode": "wave"}, "curve": 4}),
    "w2": Preset("w2", {}),
    "w2-compression": Preset("w2", {"grid": {"spacing": 40, "x_mode": "compression", "y_mode": "compression"}}),
    "box-spirals": Preset("box_spirals", {
        "divisions": Range(6, 10),
        "rotation": "random",
        "start_corner": "random",
        "size": Range(30, 60),
    }),
})


def get_preset(name: str) -> Preset:
    try:
        preset = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown preset: {name!r}. Choose from {sorted(PRESETS)}") from None
    return Preset(preset.pattern, copy.deepcopy(preset.options))
