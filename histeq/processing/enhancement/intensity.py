"""
Image Enhancement Module - Intensity Transformation Functions

Provides point transforms (logarithmic, power-law), histogram computation and
global/local histogram equalization for 8-bit grayscale images.
All functions accept NumPy ndarrays and return new ndarrays; inputs are never
modified in place.

Histogram and equalization routines are delegated to OpenCV. The point
transforms work on float32 buffers and use scikit-image to stretch the result
back to the full intensity range.
"""

import logging
from typing import Tuple

import cv2
import numpy as np
from skimage import exposure

from ...utils.constants import (
    LOG_C,
    GAMMA_C,
    GAMMA_VALUE,
    HISTOGRAM_BINS,
    MAX_INTENSITY,
    CLAHE_CLIP_LIMIT,
    CLAHE_TILE_GRID,
)

logger = logging.getLogger(__name__)


def _check_grayscale(image: np.ndarray) -> None:
    """Raise ValueError unless image is a 2D uint8 array."""
    if image.ndim != 2:
        raise ValueError(f"expected a 2D grayscale image, got shape {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"expected dtype uint8, got {image.dtype}")


def _is_constant(image: np.ndarray) -> bool:
    return image.size == 0 or image.min() == image.max()


def _to_unit_float(image: np.ndarray) -> np.ndarray:
    """Convert 8-bit intensities to float32 in [0, 1]."""
    return image.astype(np.float32) / MAX_INTENSITY


def _stretch_to_uint8(values: np.ndarray) -> np.ndarray:
    """
    Min-max rescale a float buffer to [0, 1], then quantize to uint8.

    Quantization rounds to nearest and saturates to [0, 255].
    """
    stretched = exposure.rescale_intensity(values, in_range='image', out_range=(0.0, 1.0))
    return np.clip(np.rint(stretched * MAX_INTENSITY), 0, MAX_INTENSITY).astype(np.uint8)


def log_transform(image: np.ndarray, c: float = LOG_C) -> np.ndarray:
    """
    Apply the logarithmic transform s = c * log(1 + r).

    Intensities are normalized to [0, 1] before the transform and the result
    is min-max rescaled to the full 8-bit range, so the output of any
    non-constant image spans [0, 255]. ``c`` only affects the curve before
    rescaling.

    A constant image has no range to stretch and is returned unchanged.

    Parameters
    ----------
    image : np.ndarray
        Input image as 2D uint8 array.
    c : float, optional
        Scaling constant, must be positive. Default is 1.0.

    Returns
    -------
    np.ndarray
        Transformed uint8 image with the same shape as input.

    Examples
    --------
    >>> import numpy as np
    >>> dark = (np.random.rand(100, 100) * 60).astype(np.uint8)
    >>> brightened = log_transform(dark)
    """
    _check_grayscale(image)
    if c <= 0:
        raise ValueError("c must be positive")

    if _is_constant(image):
        logger.debug("log_transform: constant image, returning input unchanged")
        return image.copy()

    result = np.log1p(_to_unit_float(image)) * c
    return _stretch_to_uint8(result)


def gamma_transform(image: np.ndarray, c: float = GAMMA_C,
                    gamma: float = GAMMA_VALUE) -> np.ndarray:
    """
    Apply the power-law (gamma) transform s = c * r ** gamma.

    Same normalization and rescaling as log_transform(). Gamma < 1 expands
    dark regions, gamma > 1 compresses them.

    Parameters
    ----------
    image : np.ndarray
        Input image as 2D uint8 array.
    c : float, optional
        Scaling constant, must be positive. Default is 1.0.
    gamma : float, optional
        Exponent, must be positive. Default is 0.4.

    Returns
    -------
    np.ndarray
        Transformed uint8 image with the same shape as input.

    Examples
    --------
    >>> import numpy as np
    >>> image = (np.random.rand(100, 100) * 255).astype(np.uint8)
    >>> brightened = gamma_transform(image, gamma=0.4)
    """
    _check_grayscale(image)
    if c <= 0:
        raise ValueError("c must be positive")
    if gamma <= 0:
        raise ValueError("gamma must be positive")

    if _is_constant(image):
        logger.debug("gamma_transform: constant image, returning input unchanged")
        return image.copy()

    result = np.power(_to_unit_float(image), gamma) * c
    return _stretch_to_uint8(result)


def calc_histogram(image: np.ndarray) -> np.ndarray:
    """
    Count occurrences of each intensity 0-255 over the whole image.

    Returns
    -------
    np.ndarray
        1D float32 array of 256 bin counts.
    """
    _check_grayscale(image)
    hist = cv2.calcHist([image], [0], None, [HISTOGRAM_BINS], [0, HISTOGRAM_BINS])
    return hist.ravel()


def global_equalization(image: np.ndarray) -> np.ndarray:
    """Apply global histogram equalization (cv2.equalizeHist)."""
    _check_grayscale(image)
    return cv2.equalizeHist(image)


def local_equalization(image: np.ndarray, clip_limit: float = CLAHE_CLIP_LIMIT,
                       tile_grid_size: Tuple[int, int] = CLAHE_TILE_GRID) -> np.ndarray:
    """
    Apply Contrast Limited Adaptive Histogram Equalization (CLAHE).

    CLAHE divides the image into tiles and equalizes each one with a contrast
    limit, then blends neighbouring tiles with bilinear interpolation.

    Parameters
    ----------
    image : np.ndarray
        Input image as 2D uint8 array.
    clip_limit : float, optional
        OpenCV contrast limit. Default is 2.0.
    tile_grid_size : tuple of int, optional
        Number of tiles (columns, rows). Default is (3, 3).

    Returns
    -------
    np.ndarray
        CLAHE-enhanced uint8 image with the same shape as input.
    """
    _check_grayscale(image)
    if clip_limit <= 0:
        raise ValueError("clip_limit must be positive")

    clahe = cv2.createCLAHE(clipLimit=clip_limit, tileGridSize=tuple(tile_grid_size))
    return clahe.apply(image)


def calculate_transform_function(image: np.ndarray) -> np.ndarray:
    """
    Compute the equalization transfer function of an image.

    The histogram is divided by the pixel count, accumulated from intensity 0
    to 255 into a CDF, and scaled to [0, 255]. The table is only meant for
    plotting: it is computed independently from global_equalization() and may
    differ from OpenCV's mapping at rounding boundaries.

    Parameters
    ----------
    image : np.ndarray
        Input image as 2D uint8 array.

    Returns
    -------
    np.ndarray
        Non-decreasing int32 array of 256 output intensities.

    Examples
    --------
    >>> import numpy as np
    >>> gray = np.full((4, 4), 128, dtype=np.uint8)
    >>> table = calculate_transform_function(gray)
    >>> int(table[127]), int(table[128])
    (0, 255)
    """
    hist = calc_histogram(image)
    pmf = hist.astype(np.float64) / image.size
    cdf = np.cumsum(pmf)

    return np.clip(np.rint(cdf * MAX_INTENSITY), 0, MAX_INTENSITY).astype(np.int32)


__all__ = [
    'log_transform',
    'gamma_transform',
    'calc_histogram',
    'global_equalization',
    'local_equalization',
    'calculate_transform_function',
]
