"""
Sobel strategy selection: software kernel, or an accelerated kernel when
both images carry the hardware capability flag.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from common.image import Image
from common.validate import validate_pair
from cpu.sobel import cpu_sobel
from gpu.sobel import gpu_available, gpu_sobel

logger = logging.getLogger("edges.sobel")


class SobelKernel:
    """(src, dst) -> dst over already validated images."""

    name = "abstract"

    def run(self, src: Image, dst: Image) -> Image:
        raise NotImplementedError


class SoftwareSobelKernel(SobelKernel):
    name = "software"

    def run(self, src: Image, dst: Image) -> Image:
        return cpu_sobel(src, dst)


class CudaSobelKernel(SobelKernel):
    name = "cuda"

    def run(self, src: Image, dst: Image) -> Image:
        return gpu_sobel(src, dst)


class SobelOperator:
    """
    Validate, then pick the kernel for this call.

    The accelerated kernel is used only when it is installed and both
    `src.hw_accel` and `dst.hw_accel` are set. Its result, or its exception,
    is returned as-is; there is no software retry.
    """

    def __init__(
        self,
        accelerated: Optional[SobelKernel] = None,
        software: Optional[SobelKernel] = None,
    ) -> None:
        self.accelerated = accelerated
        self.software = software if software is not None else SoftwareSobelKernel()

    def select(self, src: Image, dst: Image) -> SobelKernel:
        if self.accelerated is not None and src.hw_accel and dst.hw_accel:
            return self.accelerated
        return self.software

    def __call__(self, src: Image, dst: Image) -> Image:
        validate_pair(src, dst)
        kernel = self.select(src, dst)
        logger.debug("Sobel %dx%d via %s kernel", src.width, src.height, kernel.name)
        return kernel.run(src, dst)


def resolve_accelerated_kernel(cfg: Dict[str, Any]) -> Optional[SobelKernel]:
    """
    Resolve the accelerated Sobel kernel once at startup.

    cfg["edges"]["accelerator"]:
        "none": software only
        "cuda": CUDA kernel, RuntimeError if CuPy is unavailable
        "auto": CUDA kernel when CuPy is available, else software only
    """
    accelerator = cfg.get("edges", {}).get("accelerator", "none")

    if accelerator == "none":
        kernel = None
    elif accelerator == "cuda":
        if not gpu_available():
            raise RuntimeError("edges.accelerator is 'cuda' but CuPy is unavailable")
        kernel = CudaSobelKernel()
    elif accelerator == "auto":
        kernel = CudaSobelKernel() if gpu_available() else None
    else:
        raise ValueError(f"Unknown edges.accelerator: {accelerator}")

    logger.info("Sobel accelerator: %s", kernel.name if kernel is not None else "none")
    return kernel


def sobel_from_config(cfg: Dict[str, Any]) -> SobelOperator:
    return SobelOperator(accelerated=resolve_accelerated_kernel(cfg))


_default_operator = SobelOperator()


def sobel(src: Image, dst: Image) -> Image:
    """Sobel with the software kernel only; see sobel_from_config for acceleration."""
    return _default_operator(src, dst)
