"""Shared fixtures: small synthetic test targets and file helpers."""

from __future__ import annotations

import numpy as np
import pytest

from ppm_blur.image import Image


def _checker(size: int, max_value: int) -> np.ndarray:
    yy, xx = np.indices((size, size))
    on = ((xx + yy) % 2).astype(np.int64) * max_value
    return np.stack([on, max_value - on, on // 2], axis=-1)


def _gradient(width: int, height: int, max_value: int) -> np.ndarray:
    ramp = np.linspace(0, max_value, width).round().astype(np.int64)
    plane = np.tile(ramp, (height, 1))
    return np.stack([plane, plane[:, ::-1], np.full_like(plane, max_value // 3)], axis=-1)


@pytest.fixture
def checker_image() -> Image:
    return Image(6, 6, 255, _checker(6, 255))


@pytest.fixture
def gradient_image() -> Image:
    return Image(9, 4, 1023, _gradient(9, 4, 1023))


@pytest.fixture
def write_input(tmp_path):
    """Write text to ``tmp_path/name`` and return the path."""

    def _write(text: str, name: str = "in.ppm"):
        path = tmp_path / name
        path.write_text(text, encoding="ascii")
        return path

    return _write
