import numpy as np
import pytest

from ppm_blur.errors import ValidationError
from ppm_blur.image import Image


def test_from_flat_is_row_major_interleaved():
    image = Image.from_flat(2, 1, 9, [1, 2, 3, 4, 5, 6])
    assert image.samples.shape == (1, 2, 3)
    assert image.samples[0, 1].tolist() == [4, 5, 6]
    assert image.flat_samples.tolist() == [1, 2, 3, 4, 5, 6]
    assert image.sample_count == 6


def test_samples_are_read_only():
    image = Image.from_flat(1, 1, 9, [1, 2, 3])
    with pytest.raises(ValueError):
        image.samples[0, 0, 0] = 7


def test_constructor_copies_input_buffer():
    buf = np.zeros((1, 1, 3), dtype=np.int64)
    image = Image(1, 1, 5, buf)
    buf[0, 0, 0] = 5
    assert image.samples[0, 0, 0] == 0


@pytest.mark.parametrize(
    "width, height, max_value",
    [(0, 1, 255), (1, -1, 255), (1, 1, 0), (1, 1, 65536)],
)
def test_rejects_bad_header_fields(width, height, max_value):
    with pytest.raises(ValidationError):
        Image(width, height, max_value, np.zeros((max(height, 1), max(width, 1), 3)))


def test_rejects_out_of_range_sample():
    with pytest.raises(ValidationError, match="out of range"):
        Image.from_flat(1, 1, 10, [0, 11, 0])


def test_rejects_wrong_sample_count():
    with pytest.raises(ValidationError):
        Image.from_flat(2, 2, 10, [0] * 11)


def test_read_only_int64_buffer_is_adopted_without_copy():
    buf = np.arange(6, dtype=np.int64).reshape(1, 2, 3)
    buf.setflags(write=False)
    image = Image(2, 1, 9, buf)
    assert np.shares_memory(image.samples, buf)
