"""
cli.py - command-line entry point: decode → blur → encode

WHAT THIS FILE DOES
-------------------
1) Reads a plain-text (P3) PPM file into memory
2) Blurs every channel with the fixed 5×5 Gaussian kernel
3) Optionally logs PSNR and saves a before/after figure
4) Writes the blurred image as P3 text

The output file is opened only after decoding and filtering succeed, so a bad
input never leaves a partially written output behind.

USAGE
-----
  ppm-blur input.ppm output.ppm
  python -m ppm_blur input.ppm output.ppm --verbose --preview blur.png

EXIT CODES
----------
  0  success
  1  any processing error (one ``Error: <message>`` line on stderr)
  2  wrong arguments (usage message on stderr)

© 2025 PPM Blur contributors
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence

from ppm_blur.codec.decoder import read_ppm
from ppm_blur.codec.encoder import write_ppm
from ppm_blur.config import PipelineConfig
from ppm_blur.errors import PPMBlurError, ResourceError, UsageError
from ppm_blur.filters.gaussian import gaussian_blur
from ppm_blur.image import Image
from ppm_blur.log import configure_logging, get_logger
from ppm_blur.utils.metrics_module import compute_psnr, save_preview

logger = get_logger(__name__)


def run_pipeline(config: PipelineConfig) -> Image:
    """
    Execute one decode → blur → encode pass.

    Returns the blurred image. Raises ``PPMBlurError`` subclasses on failure
    (running out of memory anywhere becomes ``ResourceError``); never exits
    the process.
    """
    try:
        return _run_stages(config)
    except MemoryError as exc:
        raise ResourceError("Out of memory") from exc


def _run_stages(config: PipelineConfig) -> Image:
    # 1) Decode
    source = read_ppm(config.input_path)

    # 2) Blur (new buffer; ``source`` stays intact until the pass is done)
    blurred = gaussian_blur(source)

    # 3) Quick-look extras
    if logger.isEnabledFor(logging.INFO):
        psnr_db = compute_psnr(source.samples, blurred.samples, source.max_value)
        logger.info("PSNR input vs blurred: %.2f dB", psnr_db)
    if config.preview_path is not None:
        save_preview(source, blurred, config.preview_path)
        logger.info("saved preview to %s", config.preview_path)

    # 4) Encode
    write_ppm(blurred, config.output_path)
    return blurred


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ``UsageError`` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """CLI for the blur filter."""
    p = _ArgumentParser(
        prog="ppm-blur",
        description="Apply a 5x5 Gaussian blur to a plain-text (P3) PPM image.",
    )
    p.add_argument("input", help="input P3 PPM file")
    p.add_argument("output", help="output P3 PPM file")
    p.add_argument("-v", "--verbose", action="store_true", help="log progress to stderr")
    p.add_argument("--preview", metavar="PNG", default=None,
                   help="also save a before/after figure to this path")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    parser = build_parser()
    try:
        config = PipelineConfig.from_args(parser.parse_args(argv))
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    configure_logging(config.verbose)
    try:
        run_pipeline(config)
    except PPMBlurError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())
