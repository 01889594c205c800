# objweld/geometry/bounds.py
from __future__ import annotations

from typing import Sequence

import numpy as np

from objweld.types import BoundingBox, Position


def compute_bounds(positions: Sequence[Position]) -> BoundingBox:
    """
    Component-wise min/max over every parsed position, referenced by a face
    or not. Zero positions give BoundingBox.empty_box().
    """
    if len(positions) == 0:
        return BoundingBox.empty_box()

    pts = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)

    return BoundingBox(
        (float(lo[0]), float(lo[1]), float(lo[2])),
        (float(hi[0]), float(hi[1]), float(hi[2])),
    )
