"""
Software Sobel gradient magnitude.
"""

from __future__ import annotations

import numpy as np

from common.image import Image
from common.stencil import interior, neighborhood, saturate_u8
from common.validate import validate_pair


def cpu_sobel(src: Image, dst: Image) -> Image:
    """
    Sobel operator, L1 magnitude |Gx| + |Gy| saturated to 255.

        Gx = 1, 2, 1     Gy = 1, 0,-1
             0, 0, 0          2, 0,-2
            -1,-2,-1          1, 0,-1

    Writes interior pixels of `dst` only.
    """
    validate_pair(src, dst)
    if not src.has_interior():
        return dst

    nb = neighborhood(src.plane)
    gx = (nb.nw + (nb.n << 1) + nb.ne) - (nb.sw + (nb.s << 1) + nb.se)
    gy = (nb.nw + (nb.w << 1) + nb.sw) - (nb.ne + (nb.e << 1) + nb.se)

    interior(dst.plane)[...] = saturate_u8(np.abs(gx) + np.abs(gy))
    return dst
