import pytest

from ppm_blur.codec.decoder import decode_ppm
from ppm_blur.codec.encoder import encode_ppm, write_ppm
from ppm_blur.errors import ImageIOError
from ppm_blur.image import Image


def test_fifteen_samples_fill_exactly_one_line():
    image = Image.from_flat(5, 1, 99, list(range(15)))
    text = encode_ppm(image)
    assert text == "P3\n5 1\n99\n" + " ".join(str(v) for v in range(15)) + "\n"


def test_sixteenth_sample_starts_a_new_line():
    values = list(range(15)) + [7, 8, 9, 10, 11, 12, 13, 14, 15]
    image = Image.from_flat(8, 1, 99, values)
    lines = encode_ppm(image).split("\n")
    assert lines[:3] == ["P3", "8 1", "99"]
    assert lines[3] == " ".join(str(v) for v in range(15))
    assert lines[4] == "7 8 9 10 11 12 13 14 15"
    assert lines[5] == ""
    assert len(lines) == 6


def test_short_image_is_newline_terminated():
    assert encode_ppm(Image.from_flat(1, 1, 255, [255, 0, 17])) == "P3\n1 1\n255\n255 0 17\n"


def test_output_is_readable_by_decoder(gradient_image):
    decoded = decode_ppm(encode_ppm(gradient_image).encode("ascii"))
    assert (decoded.width, decoded.height, decoded.max_value) == (9, 4, 1023)
    assert (decoded.samples == gradient_image.samples).all()


def test_write_ppm_creates_file(tmp_path, checker_image):
    path = tmp_path / "out.ppm"
    write_ppm(checker_image, path)
    assert path.read_text(encoding="ascii") == encode_ppm(checker_image)


def test_write_ppm_bad_directory(tmp_path, checker_image):
    with pytest.raises(ImageIOError, match="Could not open output file"):
        write_ppm(checker_image, tmp_path / "missing" / "out.ppm")
