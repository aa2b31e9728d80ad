"""
Image container consumed by the gradient operators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import numpy as np


class ImageDepth(Enum):
    U8 = "8u"
    S8 = "8s"
    U16 = "16u"
    S16 = "16s"
    S32 = "32s"
    F32 = "32f"
    F64 = "64f"


_DEPTH_DTYPES = {
    ImageDepth.U8: np.uint8,
    ImageDepth.S8: np.int8,
    ImageDepth.U16: np.uint16,
    ImageDepth.S16: np.int16,
    ImageDepth.S32: np.int32,
    ImageDepth.F32: np.float32,
    ImageDepth.F64: np.float64,
}


def depth_dtype(depth: ImageDepth) -> np.dtype:
    return np.dtype(_DEPTH_DTYPES[depth])


def depth_from_dtype(dtype) -> ImageDepth:
    dtype = np.dtype(dtype)
    for depth, candidate in _DEPTH_DTYPES.items():
        if np.dtype(candidate) == dtype:
            return depth
    raise ValueError(f"No image depth for dtype {dtype}")


@dataclass
class Image:
    """
    Row-major raster with a flat sample buffer.

    Args:
        width: Pixels per row.
        height: Number of rows.
        channels: Samples per pixel.
        depth: Declared sample format.
        hw_accel: Capability flag marking the image as eligible for an
            accelerated kernel.
        data: Flat buffer of width * height * channels samples. Allocated
            zeroed when omitted.
    """

    width: int
    height: int
    channels: int = 1
    depth: ImageDepth = ImageDepth.U8
    hw_accel: bool = False
    data: Optional[np.ndarray] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.channels < 1:
            raise ValueError(
                f"Invalid image geometry {self.width}x{self.height}x{self.channels}"
            )
        size = self.width * self.height * self.channels
        if self.data is None:
            self.data = np.zeros(size, dtype=depth_dtype(self.depth))
        elif self.data.ndim != 1 or self.data.size != size:
            raise ValueError(
                f"Buffer of shape {self.data.shape} does not hold {size} samples"
            )
        elif self.data.dtype != depth_dtype(self.depth):
            raise ValueError(
                f"Buffer dtype {self.data.dtype} does not match depth {self.depth.value}"
            )

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        fill: int = 0,
        depth: ImageDepth = ImageDepth.U8,
        hw_accel: bool = False,
    ) -> "Image":
        img = cls(width, height, depth=depth, hw_accel=hw_accel)
        img.data.fill(fill)
        return img

    @classmethod
    def from_array(cls, arr: np.ndarray, hw_accel: bool = False) -> "Image":
        """
        Wrap a (H, W) or (H, W, C) array. The buffer is shared with `arr`
        when it is already C-contiguous.
        """
        if arr.ndim == 2:
            height, width = arr.shape
            channels = 1
        elif arr.ndim == 3:
            height, width, channels = arr.shape
        else:
            raise ValueError(f"Expected 2D or 3D array, got shape {arr.shape}")

        data = np.ascontiguousarray(arr).reshape(-1)
        return cls(
            width=width,
            height=height,
            channels=channels,
            depth=depth_from_dtype(arr.dtype),
            hw_accel=hw_accel,
            data=data,
        )

    @property
    def plane(self) -> np.ndarray:
        """View of `data` shaped (H, W) for one channel, else (H, W, C)."""
        if self.channels == 1:
            return self.data.reshape(self.height, self.width)
        return self.data.reshape(self.height, self.width, self.channels)

    def has_interior(self) -> bool:
        return self.width >= 3 and self.height >= 3
