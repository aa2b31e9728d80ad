from __future__ import annotations

import numpy as np

from common.image import Image
from common.stencil import interior, neighborhood, saturate_u8
from common.validate import validate_pair


def prewitt(src: Image, dst: Image) -> Image:
    """
    Prewitt operator, L1 magnitude |Gx| + |Gy| saturated to 255.

        Gx = 1, 1, 1     Gy = 1, 0,-1
             0, 0, 0          1, 0,-1
            -1,-1,-1          1, 0,-1
    """
    validate_pair(src, dst)
    if not src.has_interior():
        return dst

    nb = neighborhood(src.plane)
    gx = (nb.nw + nb.n + nb.ne) - (nb.sw + nb.s + nb.se)
    gy = (nb.nw + nb.w + nb.sw) - (nb.ne + nb.e + nb.se)

    interior(dst.plane)[...] = saturate_u8(np.abs(gx) + np.abs(gy))
    return dst
