"""
CPU reference responses built on OpenCV filter2D.

Used to cross-check the specialised operators on interior pixels.
"""

from __future__ import annotations

import cv2
import numpy as np

from common.kernels import LAPLACE_MASKS, PREWITT_X, PREWITT_Y, SOBEL_X, SOBEL_Y, LaplaceVariant


def _correlate(gray: np.ndarray, mask: np.ndarray) -> np.ndarray:
    # filter2D correlates (no kernel flip); 8U input with 16S output cannot overflow a 3x3 mask.
    return cv2.filter2D(
        gray,
        ddepth=cv2.CV_16S,
        kernel=mask.astype(np.float32),
        borderType=cv2.BORDER_REPLICATE,
    )


def reference_laplace(gray: np.ndarray, variant: LaplaceVariant) -> np.ndarray:
    """
    Saturated |Laplace| response over the interior of a 2D uint8 image.

    Returns:
        (H-2, W-2) uint8 array
    """
    if gray.ndim != 2:
        raise ValueError("reference_laplace expects 2D grayscale image")
    response = np.abs(_correlate(gray, LAPLACE_MASKS[variant]).astype(np.int32))
    return np.clip(response, 0, 255).astype(np.uint8)[1:-1, 1:-1]


def reference_gradient(gray: np.ndarray, mask_x: np.ndarray, mask_y: np.ndarray) -> np.ndarray:
    """
    Saturated |Gx| + |Gy| over the interior of a 2D uint8 image.

    Returns:
        (H-2, W-2) uint8 array
    """
    if gray.ndim != 2:
        raise ValueError("reference_gradient expects 2D grayscale image")
    gx = _correlate(gray, mask_x).astype(np.int32)
    gy = _correlate(gray, mask_y).astype(np.int32)
    return np.clip(np.abs(gx) + np.abs(gy), 0, 255).astype(np.uint8)[1:-1, 1:-1]


def reference_sobel(gray: np.ndarray) -> np.ndarray:
    return reference_gradient(gray, SOBEL_X, SOBEL_Y)


def reference_prewitt(gray: np.ndarray) -> np.ndarray:
    return reference_gradient(gray, PREWITT_X, PREWITT_Y)
