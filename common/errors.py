"""
Typed validation errors raised by the gradient operators.
"""

from __future__ import annotations


class GradientError(ValueError):
    """Base class for input images an operator refuses to process."""


class DepthOrFormatMismatch(GradientError):
    """An image does not declare the depth tag the operator requires."""


class ChannelCountNotSupported(GradientError):
    """An image is not single-channel."""


class ImageSizeMismatch(GradientError):
    """Source and destination differ in width or height."""
