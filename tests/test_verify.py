import numpy as np
import pytest
from PIL import Image

import verify
from generate import generate
from settings import Settings


def test_verify_rejects_duplicate_colors(tmp_path):
    path = tmp_path / "out.png"
    generate(Settings(2), path, quiet=True)

    arr = np.array(Image.open(path))
    arr[0, 0] = arr[0, 1]
    Image.fromarray(arr).save(path)

    with pytest.raises(AssertionError, match="more than once"):
        verify.verify(path, 2)


def test_verify_rejects_wrong_size(tmp_path):
    path = tmp_path / "out.png"
    generate(Settings(2), path, quiet=True)

    with pytest.raises(AssertionError, match="instead of 27x27"):
        verify.verify(path, 3)


def test_verify_rejects_foreign_colors(tmp_path):
    path = tmp_path / "out.png"
    generate(Settings(2), path, quiet=True)

    arr = np.array(Image.open(path))
    arr[arr == 85] = 86
    Image.fromarray(arr).save(path)

    with pytest.raises(AssertionError, match="color cube"):
        verify.verify(path, 2)


def test_grown_image_is_smoother_than_shuffled(tmp_path):
    grown_path = tmp_path / "grown.png"
    shuffled_path = tmp_path / "shuffled.png"
    generate(Settings(3), grown_path, quiet=True)

    arr = np.array(Image.open(grown_path))
    pixels = arr.reshape(-1, 3)
    np.random.default_rng(0).shuffle(pixels)
    Image.fromarray(pixels.reshape(arr.shape)).save(shuffled_path)

    verify.verify(shuffled_path, 3)

    assert verify.smoothness(grown_path) < verify.smoothness(shuffled_path)


def test_smoothness_of_single_pixel(tmp_path):
    path = tmp_path / "out.png"
    generate(Settings(1), path, quiet=True)

    assert verify.smoothness(path) == 0.0
