"""
image.py - in-memory RGB image shared by every pipeline stage

WHAT THIS MODULE PROVIDES
-------------------------
``Image`` bundles the header fields of a P3 file with its samples:
  • width, height    - positive pixel dimensions
  • max_value        - declared upper bound of every sample, 1..65535
  • samples          - int64 array of shape (height, width, 3)

The C-order flattening of ``samples`` is exactly the order in which the
values appear in the file: row-major, channel-interleaved (R, G, B per pixel).

Instances are immutable: the dataclass is frozen and the sample array is
flagged read-only on construction. Stages that build a fresh buffer hand it
over already read-only, so no extra copy is made. A filter therefore always
produces a new Image and can never write into the buffer it is reading from.

© 2025 PPM Blur contributors
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ppm_blur.errors import ResourceError, ValidationError

MAX_VALUE_LIMIT = 65535
CHANNELS = 3


@dataclass(frozen=True, eq=False)
class Image:
    """
    RGB image with an explicit sample ceiling.

    Parameters
    ----------
    width, height : int
        Pixel dimensions (> 0).
    max_value : int
        Largest legal sample value, in [1, 65535].
    samples : ndarray
        Integer array of shape (height, width, 3). A read-only int64 array is
        kept as-is; anything else is copied to int64 and made read-only.
    """
    width: int
    height: int
    max_value: int
    samples: np.ndarray

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValidationError("Width and height must be positive")
        if not 1 <= self.max_value <= MAX_VALUE_LIMIT:
            raise ValidationError(f"Max color value must be 1..{MAX_VALUE_LIMIT}")

        samples = self.samples
        adoptable = (
            isinstance(samples, np.ndarray)
            and samples.dtype == np.int64
            and not samples.flags.writeable
        )
        if not adoptable:
            try:
                samples = np.array(samples, dtype=np.int64, copy=True)
            except MemoryError as exc:
                raise ResourceError("Out of memory") from exc

        expected = (self.height, self.width, CHANNELS)
        if samples.shape != expected:
            raise ValidationError(f"Sample array has shape {samples.shape}, expected {expected}")
        if samples.size and (samples.min() < 0 or samples.max() > self.max_value):
            raise ValidationError("Pixel value out of range")

        samples.setflags(write=False)
        # frozen dataclass: bypass __setattr__ to store the normalized array
        object.__setattr__(self, "samples", samples)

    @classmethod
    def from_flat(
        cls,
        width: int,
        height: int,
        max_value: int,
        values: Sequence[int] | np.ndarray,
    ) -> "Image":
        """Build an Image from samples listed in file (stream) order."""
        flat = np.asarray(values, dtype=np.int64)
        if flat.size != width * height * CHANNELS:
            raise ValidationError(
                f"Expected {width * height * CHANNELS} samples, got {flat.size}"
            )
        return cls(width, height, max_value, flat.reshape(height, width, CHANNELS))

    @property
    def flat_samples(self) -> np.ndarray:
        """Read-only 1-D view of the samples in stream order."""
        return self.samples.reshape(-1)

    @property
    def sample_count(self) -> int:
        return self.width * self.height * CHANNELS
