from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np
import pytest

from common.image import Image, ImageDepth, depth_from_dtype


def test_blank_allocates_flat_buffer():
    img = Image.blank(5, 3, fill=9)
    assert img.data.shape == (15,)
    assert img.data.dtype == np.uint8
    assert np.all(img.data == 9)
    assert img.plane.shape == (3, 5)


def test_from_array_shares_memory():
    arr = np.zeros((4, 6), dtype=np.uint8)
    img = Image.from_array(arr)
    img.plane[2, 3] = 42
    assert arr[2, 3] == 42
    assert (img.width, img.height, img.channels) == (6, 4, 1)


def test_from_array_infers_depth_and_channels():
    img = Image.from_array(np.zeros((2, 3, 3), dtype=np.int16))
    assert img.depth == ImageDepth.S16
    assert img.channels == 3
    assert img.plane.shape == (2, 3, 3)


def test_buffer_size_must_match_geometry():
    with pytest.raises(ValueError):
        Image(4, 4, data=np.zeros(10, dtype=np.uint8))


def test_unknown_dtype_rejected():
    with pytest.raises(ValueError):
        depth_from_dtype(np.complex64)


def test_interior_requires_three_by_three():
    assert Image(3, 3).has_interior()
    assert not Image(2, 5).has_interior()
    assert not Image(5, 2).has_interior()


def test_buffer_dtype_must_match_depth():
    with pytest.raises(ValueError, match="does not match depth"):
        Image(4, 4, data=np.zeros(16, dtype=np.int32))
    img = Image(4, 4, depth=ImageDepth.S32, data=np.zeros(16, dtype=np.int32))
    assert img.depth == ImageDepth.S32
