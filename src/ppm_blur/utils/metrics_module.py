"""
metrics_module.py - quality metric and quick-look figure for blur runs

WHAT THIS MODULE PROVIDES
-------------------------
• compute_psnr(reference, test, max_value)
    Peak signal-to-noise ratio between the input and blurred samples. Gives a
    single number for how strongly the filter changed the image.

• save_preview(before, after, path)
    Two-panel "Input | Blurred" PNG for eyeballing the result. Uses the
    non-interactive Agg canvas so it works without a display.

LEARNING NOTES
--------------
• PSNR = 10 * log10(MAX^2 / MSE). Identical images have MSE = 0 and an
  infinite PSNR; the function returns ``float("inf")`` in that case.
• Samples are divided by max_value for display so 8-bit and 16-bit images
  render with the same contrast.

© 2025 PPM Blur contributors
"""

from __future__ import annotations
import math
import os

import numpy as np
from matplotlib.figure import Figure

from ppm_blur.errors import ImageIOError
from ppm_blur.image import Image


# -----------------------------------------------------------------------------
# PSNR (frame-level)
# -----------------------------------------------------------------------------
def compute_psnr(reference: np.ndarray, test: np.ndarray, max_value: int) -> float:
    """
    Compute PSNR in dB between two equally shaped sample arrays.

    Parameters
    ----------
    reference : ndarray
        Original samples.
    test : ndarray
        Processed samples, same shape as ``reference``.
    max_value : int
        Peak sample value (the image's max_value).

    Returns
    -------
    psnr_db : float
        ``inf`` when the arrays are identical.
    """
    if reference.shape != test.shape:
        raise ValueError(f"Shape mismatch: {reference.shape} vs {test.shape}")

    diff = reference.astype(np.float64) - test.astype(np.float64)
    mse = float(np.mean(diff * diff))
    if mse == 0.0:
        return math.inf
    return 10.0 * math.log10(float(max_value) ** 2 / mse)


# -----------------------------------------------------------------------------
# Before/after figure
# -----------------------------------------------------------------------------
def _display(image: Image) -> np.ndarray:
    return image.samples.astype(np.float32) / float(image.max_value)


def save_preview(before: Image, after: Image, path: str | os.PathLike) -> None:
    """
    Save a side-by-side "Input | Blurred" figure as PNG.

    Parameters
    ----------
    before, after : Image
        Source and filtered images.
    path : path-like
        Destination file.
    """
    fig = Figure(figsize=(8, 4))
    axs = fig.subplots(1, 2)
    axs[0].imshow(_display(before), vmin=0, vmax=1); axs[0].set_title("Input");   axs[0].axis("off")
    axs[1].imshow(_display(after), vmin=0, vmax=1);  axs[1].set_title("Blurred"); axs[1].axis("off")
    fig.tight_layout()
    try:
        fig.savefig(path, dpi=150)
    except OSError as exc:
        raise ImageIOError(f"Could not write preview file: {exc.strerror or exc}") from exc
    except ValueError as exc:
        # matplotlib rejects unknown file suffixes with ValueError
        raise ImageIOError(f"Could not write preview file: {exc}") from exc
