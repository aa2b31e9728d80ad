"""
GPU Sobel gradient magnitude using a CuPy RawKernel.
Same integer semantics and written region as cpu.sobel.cpu_sobel.
"""

from __future__ import annotations

import numpy as np

from common.image import Image

try:
    import cupy as cp
    from cupy import RawKernel
except Exception as exc:  # pragma: no cover
    cp = None
    RawKernel = None
    _gpu_import_error = exc
else:
    _gpu_import_error = None


_SOBEL_U8_KERNEL = """
extern "C" __global__
void sobel_u8(
    const unsigned char* src,
    unsigned char* dst,
    int height,
    int width
) {
    int x = blockIdx.x * blockDim.x + threadIdx.x;
    int y = blockIdx.y * blockDim.y + threadIdx.y;

    // Interior only; the 1-pixel frame of dst is left as uploaded
    if (x < 1 || x >= width - 1 || y < 1 || y >= height - 1) {
        return;
    }

    int nw = src[(y-1) * width + (x-1)];
    int n  = src[(y-1) * width + x];
    int ne = src[(y-1) * width + (x+1)];
    int w  = src[y * width + (x-1)];
    int e  = src[y * width + (x+1)];
    int sw = src[(y+1) * width + (x-1)];
    int s  = src[(y+1) * width + x];
    int se = src[(y+1) * width + (x+1)];

    int gx = (nw + 2 * n + ne) - (sw + 2 * s + se);
    int gy = (nw + 2 * w + sw) - (ne + 2 * e + se);

    int mag = abs(gx) + abs(gy);
    dst[y * width + x] = (unsigned char)(mag > 255 ? 255 : mag);
}
"""


def gpu_available() -> bool:
    return cp is not None


def gpu_sobel(src: Image, dst: Image) -> Image:
    """
    Sobel operator on device. Uploads both buffers, runs the kernel and
    copies the result back into `dst.data`.

    Args:
        src: validated U8 single-channel image
        dst: validated U8 single-channel image of the same size

    Returns:
        dst
    """
    if cp is None:
        raise RuntimeError(f"CuPy not available for GPU Sobel: {_gpu_import_error}")

    if not src.has_interior():
        return dst

    h, w = src.height, src.width
    src_gpu = cp.asarray(src.data, dtype=cp.uint8)
    dst_gpu = cp.asarray(dst.data, dtype=cp.uint8)

    # Compile kernel (cache it)
    if not hasattr(gpu_sobel, "_kernel"):
        gpu_sobel._kernel = RawKernel(_SOBEL_U8_KERNEL, "sobel_u8")

    kernel = gpu_sobel._kernel

    block_size = (16, 16)
    grid_size = (
        (w + block_size[0] - 1) // block_size[0],
        (h + block_size[1] - 1) // block_size[1],
    )

    kernel(grid_size, block_size, (src_gpu, dst_gpu, np.int32(h), np.int32(w)))

    dst.data[...] = cp.asnumpy(dst_gpu)
    return dst
