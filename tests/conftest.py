import cv2
import numpy as np
import pytest


@pytest.fixture
def mid_gray():
    """4x4 image with every pixel at 128."""
    return np.full((4, 4), 128, dtype=np.uint8)


@pytest.fixture
def gradient():
    """Every intensity 0-255 exactly once per row."""
    return np.tile(np.arange(256, dtype=np.uint8), (32, 1))


@pytest.fixture
def random_image():
    rng = np.random.default_rng(0)
    return rng.integers(0, 256, size=(64, 64), dtype=np.uint8)


@pytest.fixture
def low_contrast():
    rng = np.random.default_rng(1)
    return rng.integers(100, 121, size=(48, 64), dtype=np.uint8)


@pytest.fixture
def write_input(tmp_path):
    """Write an image under tmp_path/input and return its path as a string."""
    input_dir = tmp_path / "input"
    input_dir.mkdir(exist_ok=True)

    def _write(name, image):
        path = input_dir / name
        assert cv2.imwrite(str(path), image)
        return str(path)

    return _write
