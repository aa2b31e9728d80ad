"""
Depth, channel and geometry checks run before any operator touches pixels.
"""

from __future__ import annotations

from typing import Tuple

from common.errors import ChannelCountNotSupported, DepthOrFormatMismatch, ImageSizeMismatch
from common.image import Image, ImageDepth


def check_depth(*pairs: Tuple[Image, ImageDepth]) -> None:
    """
    Confirm every image declares its expected depth tag.

    Args:
        pairs: (image, expected_depth) tuples, checked in order.

    Raises:
        DepthOrFormatMismatch: on the first image whose depth differs.
    """
    for pos, (img, expected) in enumerate(pairs):
        if img.depth != expected:
            raise DepthOrFormatMismatch(
                f"Image {pos} has depth {img.depth.value}, expected {expected.value}"
            )


def check_channels(*images: Image, expected: int = 1) -> None:
    for pos, img in enumerate(images):
        if img.channels != expected:
            raise ChannelCountNotSupported(
                f"Image {pos} has {img.channels} channels, expected {expected}"
            )


def check_same_size(src: Image, dst: Image) -> None:
    if (src.width, src.height) != (dst.width, dst.height):
        raise ImageSizeMismatch(
            f"Source is {src.width}x{src.height}, destination is {dst.width}x{dst.height}"
        )


def validate_pair(src: Image, dst: Image) -> None:
    """
    Gate shared by the Laplace, Sobel and Prewitt operators: both images
    must be single-channel 8-bit unsigned with matching geometry.
    """
    check_depth((src, ImageDepth.U8), (dst, ImageDepth.U8))
    check_channels(src, dst)
    check_same_size(src, dst)
