"""
Canny edge detector entry point.
"""

from __future__ import annotations

from common.image import Image


def canny(src: Image, dst: Image, ang: Image) -> Image:
    """
    Multi-stage edge detection into `dst` with gradient directions in `ang`.

    Gradient, orientation binning, non-maximum suppression and hysteresis
    are not implemented: the call succeeds without reading or writing any
    pixel of `src`, `dst` or `ang`.
    """
    return dst
