"""
Shifted views over a plane for 3x3 stencils evaluated on interior pixels.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class Neighborhood(NamedTuple):
    nw: np.ndarray
    n: np.ndarray
    ne: np.ndarray
    w: np.ndarray
    c: np.ndarray
    e: np.ndarray
    sw: np.ndarray
    s: np.ndarray
    se: np.ndarray


def neighborhood(plane: np.ndarray) -> Neighborhood:
    """
    Nine (H-2, W-2) int16 views, one per stencil tap, aligned so that index
    [r, c] of every view refers to interior pixel (r + 1, c + 1).
    """
    p = plane.astype(np.int16)
    return Neighborhood(
        nw=p[:-2, :-2],
        n=p[:-2, 1:-1],
        ne=p[:-2, 2:],
        w=p[1:-1, :-2],
        c=p[1:-1, 1:-1],
        e=p[1:-1, 2:],
        sw=p[2:, :-2],
        s=p[2:, 1:-1],
        se=p[2:, 2:],
    )


def saturate_u8(response: np.ndarray) -> np.ndarray:
    """Clamp a signed response into [0, 255] and narrow to uint8."""
    return np.clip(response, 0, 255).astype(np.uint8)


def interior(plane: np.ndarray) -> np.ndarray:
    """Writable view of the pixels a 3x3 stencil can fully cover."""
    return plane[1:-1, 1:-1]
