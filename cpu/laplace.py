"""
Laplace edge operator on 8-bit single-channel images.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import numpy as np

from common.image import Image
from common.kernels import LaplaceVariant, parse_laplace_variant
from common.stencil import interior, neighborhood, saturate_u8
from common.validate import validate_pair

logger = logging.getLogger("edges.laplace")


def laplace(
    src: Image,
    dst: Image,
    variant: LaplaceVariant | int = LaplaceVariant.FOUR_NEIGHBOR,
) -> Image:
    """
    Second-derivative edge response written into `dst` in place.

    Masks:
        1 =  0, 1, 0     2 = 1, 1, 1
             1,-4, 1         1,-8, 1
             0, 1, 0         1, 1, 1

    Only interior pixels (rows 1..H-2, cols 1..W-2) are written; the
    one-pixel frame of `dst` keeps its prior contents. An unsupported
    `variant` writes nothing.

    Args:
        src: U8 single-channel input image
        dst: U8 single-channel output image, same size as `src`
        variant: mask selector

    Returns:
        dst
    """
    validate_pair(src, dst)

    selected = parse_laplace_variant(variant)
    if selected is None:
        logger.debug("Unsupported Laplace variant %r, leaving destination untouched", variant)
        return dst

    if not src.has_interior():
        return dst

    nb = neighborhood(src.plane)
    if selected == LaplaceVariant.FOUR_NEIGHBOR:
        response = (nb.n + nb.s + nb.w + nb.e) - (nb.c << 2)
    else:
        response = (
            nb.nw + nb.n + nb.ne + nb.w + nb.e + nb.sw + nb.s + nb.se
        ) - (nb.c << 3)

    interior(dst.plane)[...] = saturate_u8(np.abs(response))
    return dst


def laplace_from_config(src: Image, dst: Image, cfg: Dict[str, Any]) -> Image:
    """Laplace with the mask selected by cfg["edges"]["laplace_variant"] (default 1)."""
    variant = cfg.get("edges", {}).get("laplace_variant", LaplaceVariant.FOUR_NEIGHBOR)
    return laplace(src, dst, variant)
