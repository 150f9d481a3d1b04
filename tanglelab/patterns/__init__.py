"""Pattern generators and the name registry used by the CLI and presets."""

from typing import Any, Mapping, Optional

from .aahs import Aah, Aahs, Dot
from .ambler import Ambler
from .base import GridPattern, Pattern, TangleContext, render_tangle
from .box_spirals import BoxSpirals
from .emingle import Emingle
from .huggins import Huggins
from .w2 import W2

PATTERNS = {
    "aahs": Aahs,
    "ambler": Ambler,
    "box_spirals": BoxSpirals,
    "emingle": Emingle,
    "huggins": Huggins,
    "w2": W2,
}


def make_pattern(name: str, options: Optional[Mapping[str, Any]] = None) -> Pattern:
    cls = PATTERNS.get(name)
    if cls is None:
        raise ValueError(f"Unknown pattern: {name!r}. Choose from {sorted(PATTERNS)}")
    return cls(options)


__all__ = [
    "Aah", "Aahs", "Ambler", "BoxSpirals", "Dot", "Emingle", "GridPattern", "Huggins",
    "PATTERNS", "Pattern", "TangleContext", "W2", "make_pattern", "render_tangle",
]
