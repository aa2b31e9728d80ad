from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from common.image import Image


def write_csv(path: Path, header: Sequence[str], rows: Iterable[Sequence]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in rows:
            writer.writerow(row)


def image_pair(src_plane: np.ndarray, fill: int = 77, hw_accel: bool = False) -> tuple[Image, Image]:
    """
    Wrap `src_plane` and allocate a destination prefilled with `fill` so
    untouched pixels can be told apart from written ones.
    """
    src = Image.from_array(np.ascontiguousarray(src_plane, dtype=np.uint8), hw_accel=hw_accel)
    dst = Image.blank(src.width, src.height, fill=fill, hw_accel=hw_accel)
    return src, dst


def frame_mask(height: int, width: int) -> np.ndarray:
    """True on the one-pixel border that stencil operators never write."""
    mask = np.ones((height, width), dtype=bool)
    mask[1:-1, 1:-1] = False
    return mask


def random_frames(count: int, height: int, width: int, seed: int = 0) -> list[np.ndarray]:
    rng = np.random.default_rng(seed)
    return [rng.integers(0, 256, size=(height, width), dtype=np.uint8) for _ in range(count)]


def max_abs_diff(a: np.ndarray, b: np.ndarray) -> int:
    return int(np.max(np.abs(a.astype(np.int32) - b.astype(np.int32)), initial=0))
