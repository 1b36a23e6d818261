"""
encoder.py - plain-text (P3) PPM writer

Output layout (byte-exact, readable by ``decoder.decode_ppm``):

    P3
    <width> <height>
    <max_value>
    s0 s1 ... s14
    s15 ...

Samples are written 15 per line separated by single spaces; a short last
line still ends with a newline. No comments are emitted.
"""

from __future__ import annotations
import io
import os
from typing import TextIO

import numpy as np

from ppm_blur.errors import ImageIOError
from ppm_blur.image import Image
from ppm_blur.log import get_logger

SAMPLES_PER_LINE = 15

logger = get_logger(__name__)


def dump_ppm(image: Image, fp: TextIO) -> None:
    """Write ``image`` to an open text stream."""
    fp.write(f"P3\n{image.width} {image.height}\n{image.max_value}\n")

    flat = image.flat_samples
    full = (flat.size // SAMPLES_PER_LINE) * SAMPLES_PER_LINE
    if full:
        np.savetxt(fp, flat[:full].reshape(-1, SAMPLES_PER_LINE), fmt="%d", delimiter=" ")
    if full < flat.size:
        np.savetxt(fp, flat[full:].reshape(1, -1), fmt="%d", delimiter=" ")


def encode_ppm(image: Image) -> str:
    """Return the P3 text for ``image``."""
    buf = io.StringIO()
    dump_ppm(image, buf)
    return buf.getvalue()


def write_ppm(image: Image, path: str | os.PathLike) -> None:
    """Write ``image`` as a P3 file at ``path``, replacing any existing file."""
    try:
        fh = open(path, "w", encoding="ascii", newline="\n")
    except OSError as exc:
        raise ImageIOError(f"Could not open output file: {exc.strerror or exc}") from exc
    with fh:
        dump_ppm(image, fh)
    logger.info("wrote %d samples to %s", image.sample_count, path)
