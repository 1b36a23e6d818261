"""
errors.py - failure taxonomy for the ppm_blur pipeline

Every stage raises one of these instead of terminating the process; only the
CLI turns them into an exit code and a single ``Error: <message>`` line.
"""

from __future__ import annotations


class PPMBlurError(Exception):
    """Base class for all pipeline failures."""

    exit_code: int = 1


class UsageError(PPMBlurError):
    """Wrong command-line invocation."""

    exit_code = 2


class ImageIOError(PPMBlurError):
    """Input or output path could not be opened."""


class FormatError(PPMBlurError):
    """The token stream is not a well-formed P3 image."""


class ValidationError(PPMBlurError):
    """Header or sample values are outside their allowed range."""


class ResourceError(PPMBlurError):
    """A pixel buffer could not be allocated."""
