"""
decoder.py - plain-text (P3) PPM reader

WHAT THIS MODULE DOES
---------------------
Turns the bytes of an ASCII PPM file into an ``Image``:
  1) Scan whitespace-separated tokens lazily, skipping ``#`` comments (a
     comment runs up to the next newline). The marker must come first; a
     comment before it is rejected.
  2) Check the ``P3`` marker, then read width, height and max_value.
  3) Apply the size guard (at most 200,000,000 samples) before allocating.
  4) Read exactly width*height*3 samples, range-checking each one.

Tokens after the last sample are ignored. Every problem raises a
``FormatError`` or ``ValidationError`` for the first offending token in
stream order; nothing here touches the process exit status.

© 2025 PPM Blur contributors
"""

from __future__ import annotations
import os
import re
from typing import Iterator, List

import numpy as np

from ppm_blur.errors import FormatError, ImageIOError, ResourceError, ValidationError
from ppm_blur.image import CHANNELS, MAX_VALUE_LIMIT, Image
from ppm_blur.log import get_logger

MAGIC = b"P3"
MAX_SAMPLES = 200_000_000

_TOKEN_RE = re.compile(rb"[^\s#]+|#[^\n]*")
_INT_RE = re.compile(rb"[+-]?[0-9]+")

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Tokenizer
# -----------------------------------------------------------------------------
def _scan(data: bytes) -> Iterator[bytes]:
    for match in _TOKEN_RE.finditer(data):
        yield match.group()


def _without_comments(scan: Iterator[bytes]) -> Iterator[bytes]:
    return (token for token in scan if not token.startswith(b"#"))


def tokenize(data: bytes) -> Iterator[bytes]:
    """
    Yield the tokens of a P3 byte stream one at a time, discarding comments.

    A ``#`` also ends the token it touches, so ``12#x\\n34`` yields two tokens.
    """
    return _without_comments(_scan(data))


def _parse_int(token: bytes) -> int:
    if not _INT_RE.fullmatch(token):
        raise FormatError("Bad integer in file")
    return int(token)


def _header_ints(tokens: Iterator[bytes]) -> List[int]:
    values = []
    for _ in range(3):
        token = next(tokens, None)
        if token is None:
            raise FormatError("Missing width/height/maxval")
        values.append(_parse_int(token))
    return values


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def decode_ppm(data: bytes) -> Image:
    """
    Parse a complete P3 file held in memory.

    Parameters
    ----------
    data : bytes
        Raw file contents.

    Returns
    -------
    image : Image
        Decoded image; samples are int64 in [0, max_value].

    Raises
    ------
    FormatError
        Missing/unsupported marker, missing header fields, a token that is not
        an integer, or fewer samples than the header declares.
    ValidationError
        Non-positive dimensions, max_value outside 1..65535, an image larger
        than 200,000,000 samples, or a sample outside [0, max_value].
    ResourceError
        The sample buffer could not be allocated.
    """
    scan = _scan(data)
    magic = next(scan, None)
    if magic is None:
        raise FormatError("Could not read PPM header")
    if magic != MAGIC:
        raise FormatError("Only P3 PPM format is supported")
    tokens = _without_comments(scan)

    width, height, max_value = _header_ints(tokens)
    if width <= 0 or height <= 0:
        raise ValidationError("Width and height must be positive")
    if not 1 <= max_value <= MAX_VALUE_LIMIT:
        raise ValidationError(f"Max color value must be 1..{MAX_VALUE_LIMIT}")

    total = width * height * CHANNELS
    if total <= 0 or total > MAX_SAMPLES:
        raise ValidationError("Image too large")

    try:
        values = np.empty(total, dtype=np.int64)
    except MemoryError as exc:
        raise ResourceError("Out of memory") from exc

    count = 0
    for token in tokens:
        if count == total:
            break
        value = _parse_int(token)
        if value < 0 or value > max_value:
            raise ValidationError("Pixel value out of range")
        values[count] = value
        count += 1
    if count < total:
        raise FormatError("Unexpected EOF in pixel data")
    values.setflags(write=False)

    logger.info("decoded %dx%d image, max_value=%d", width, height, max_value)
    return Image.from_flat(width, height, max_value, values)


def read_ppm(path: str | os.PathLike) -> Image:
    """Read and decode the P3 file at ``path``."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        raise ImageIOError(f"Could not open input file: {exc.strerror or exc}") from exc
    except MemoryError as exc:
        raise ResourceError("Out of memory") from exc
    return decode_ppm(data)
