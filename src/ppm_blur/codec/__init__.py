"""
ppm_blur.codec
--------------
Plain-text PPM (P3) decoder and encoder. Binary variants are not handled.
"""

from ppm_blur.codec.decoder import decode_ppm, read_ppm, tokenize
from ppm_blur.codec.encoder import SAMPLES_PER_LINE, dump_ppm, encode_ppm, write_ppm

__all__ = [
    "SAMPLES_PER_LINE",
    "decode_ppm",
    "dump_ppm",
    "encode_ppm",
    "read_ppm",
    "tokenize",
    "write_ppm",
]
