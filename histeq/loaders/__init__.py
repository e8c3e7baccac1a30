"""
HISTEQ Loaders Package.

Image decode/encode through OpenCV. Images are returned as NumPy arrays;
grayscale is the default decode mode.
"""

from .image_io import load as load_image
from .image_io import save as save_image

__all__ = [
    "load_image",
    "save_image",
]
