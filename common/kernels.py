"""
Fixed 3x3 coefficient masks, laid out in correlation order (row 0 is north).
"""

from __future__ import annotations

from enum import IntEnum

import numpy as np


class LaplaceVariant(IntEnum):
    FOUR_NEIGHBOR = 1
    EIGHT_NEIGHBOR = 2


LAPLACE_4 = np.array([[0, 1, 0], [1, -4, 1], [0, 1, 0]], dtype=np.int16)
LAPLACE_8 = np.array([[1, 1, 1], [1, -8, 1], [1, 1, 1]], dtype=np.int16)

LAPLACE_MASKS = {
    LaplaceVariant.FOUR_NEIGHBOR: LAPLACE_4,
    LaplaceVariant.EIGHT_NEIGHBOR: LAPLACE_8,
}

# Gx: north row minus south row. Gy: west column minus east column.
SOBEL_X = np.array([[1, 2, 1], [0, 0, 0], [-1, -2, -1]], dtype=np.int16)
SOBEL_Y = np.array([[1, 0, -1], [2, 0, -2], [1, 0, -1]], dtype=np.int16)

PREWITT_X = np.array([[1, 1, 1], [0, 0, 0], [-1, -1, -1]], dtype=np.int16)
PREWITT_Y = np.array([[1, 0, -1], [1, 0, -1], [1, 0, -1]], dtype=np.int16)


def parse_laplace_variant(value) -> LaplaceVariant | None:
    """
    Return the matching variant, or None for an unsupported selector.

    Only LaplaceVariant members and integers (bool excluded) are selectors;
    floats and strings are unsupported even when they look like 1 or 2.
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return None
    try:
        return LaplaceVariant(int(value))
    except ValueError:
        return None
