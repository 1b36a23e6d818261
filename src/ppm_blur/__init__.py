"""
ppm_blur - 5×5 Gaussian blur for plain-text PPM images
=======================================================
A small, strictly sequential pipeline organized as:
    codec.decoder → filters.gaussian → codec.encoder
with ``cli`` wiring the stages to two file paths. Every stage raises an
exception from ``ppm_blur.errors`` on failure; only the CLI maps those to
exit codes.

© 2025 PPM Blur contributors
"""

from ppm_blur.codec import decode_ppm, encode_ppm, read_ppm, write_ppm
from ppm_blur.filters import gaussian_blur
from ppm_blur.image import Image

__all__ = ["Image", "decode_ppm", "encode_ppm", "gaussian_blur", "read_ppm", "write_ppm"]

__version__ = "0.1.0"
