"""
gaussian.py - fixed 5×5 integer Gaussian blur

WHAT THIS MODULE DOES
---------------------
Smooths every channel of an ``Image`` with a constant 5×5 kernel:

    1 2 3 2 1
    2 4 6 4 2
    3 6 9 6 3      (sum = 81, center at row 2 / column 2)
    2 4 6 4 2
    1 2 3 2 1

The table is the outer product of the tent row [1, 2, 3, 2, 1] with itself,
an integer approximation of a sampled Gaussian with σ ≈ 1 px.

EDGE POLICY
-----------
Neighbours outside the frame are clamped to the nearest valid row/column
(``mode="nearest"`` in scipy.ndimage), never wrapped or zero-filled. A 1×1
image therefore reads its single pixel for all 25 taps.

ARITHMETIC
----------
The weighted sum of a tap window is at most 81 * 65535 < 2**23. scipy
accumulates each window in float64, which is exact at that size, and stores
it straight into an int64 output buffer. The rounded division
``(acc + 40) // 81`` and the clamp to [0, max_value] then run in place on
that buffer, so at most two full-size arrays (input and output) are alive.
Input and output buffers are always distinct.

© 2025 PPM Blur contributors
"""

from __future__ import annotations

import numpy as np
from scipy import ndimage

from ppm_blur.errors import ResourceError
from ppm_blur.image import Image
from ppm_blur.log import get_logger

logger = get_logger(__name__)


# =============================================================================
# Kernel (constant data)
# =============================================================================
GAUSSIAN_5X5 = np.array(
    [
        [1, 2, 3, 2, 1],
        [2, 4, 6, 4, 2],
        [3, 6, 9, 6, 3],
        [2, 4, 6, 4, 2],
        [1, 2, 3, 2, 1],
    ],
    dtype=np.int64,
)
GAUSSIAN_5X5.setflags(write=False)

KERNEL_SUM = int(GAUSSIAN_5X5.sum())  # 81


# =============================================================================
# Convolution helpers
# =============================================================================
def apply_kernel(samples: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """
    Edge-clamped weighted sum of each sample's neighbourhood, per channel.

    Parameters
    ----------
    samples : (H, W, C) integer ndarray
        Interleaved channel samples. Never modified.
    kernel : (k, k) integer ndarray
        Odd-sized weight table; ``kernel[ky + r, kx + r]`` weights the sample
        at offset (ky, kx) from the output position.

    Returns
    -------
    acc : (H, W, C) int64 ndarray
        Un-normalized accumulated sums (a fresh array).
    """
    if samples.ndim != 3:
        raise ValueError(f"Expected (H, W, C) samples, got shape {samples.shape}")
    if kernel.ndim != 2 or kernel.shape[0] % 2 == 0 or kernel.shape[0] != kernel.shape[1]:
        raise ValueError(f"Expected an odd square kernel, got shape {kernel.shape}")

    # A trailing axis of length 1 keeps channels from mixing.
    weights = kernel.astype(np.float64)[:, :, np.newaxis]
    try:
        return ndimage.correlate(samples, weights, output=np.int64, mode="nearest")
    except MemoryError as exc:
        raise ResourceError("Out of memory") from exc


def gaussian_blur(image: Image) -> Image:
    """
    Blur an image with the fixed 5×5 kernel.

    Parameters
    ----------
    image : Image
        Source image (read-only; left untouched).

    Returns
    -------
    blurred : Image
        New image with the same width, height and max_value.
    """
    out = apply_kernel(image.samples, GAUSSIAN_5X5)
    out += KERNEL_SUM // 2
    out //= KERNEL_SUM
    np.clip(out, 0, image.max_value, out=out)
    out.setflags(write=False)

    logger.info("blurred %dx%d image with %dx%d kernel", image.width, image.height,
                *GAUSSIAN_5X5.shape)
    return Image(image.width, image.height, image.max_value, out)
