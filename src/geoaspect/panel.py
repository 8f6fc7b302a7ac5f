from __future__ import annotations

import math
from typing import Optional, Tuple


def panel_size(aspect: Optional[float], width: float, height: float) -> Tuple[float, float]:
    """Largest (width, height) with height/width == aspect that fits the available box.

    An unset aspect leaves the box as is.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive")
    if aspect is None:
        return width, height
    if not math.isfinite(aspect) or aspect < 0:
        raise ValueError(f"aspect must be a finite non-negative number, got {aspect}")

    if aspect * width <= height:
        return width, width * aspect
    return height / aspect, height
