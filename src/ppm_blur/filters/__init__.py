"""
ppm_blur.filters
----------------
Spatial filters on ``Image`` objects. Only the fixed 5×5 Gaussian blur is
provided; the kernel is constant and cannot be configured.
"""

from ppm_blur.filters.gaussian import GAUSSIAN_5X5, KERNEL_SUM, apply_kernel, gaussian_blur

__all__ = ["GAUSSIAN_5X5", "KERNEL_SUM", "apply_kernel", "gaussian_blur"]
