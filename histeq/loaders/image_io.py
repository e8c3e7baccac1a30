import logging
import os
from pathlib import Path
from typing import Union

import cv2
import numpy as np

logger = logging.getLogger(__name__)


def load(path: Union[str, Path], flags: int = cv2.IMREAD_GRAYSCALE) -> np.ndarray:
    """
    Loads an image file with OpenCV and returns it as a NumPy array.
    
    Any format OpenCV can decode (TIFF, PNG, JPEG, ...) is accepted. By default
    the image is decoded as single-channel 8-bit grayscale.
    
    Args:
        path: Path to the image file.
        flags: OpenCV imread flags. Default is cv2.IMREAD_GRAYSCALE.
        
    Returns:
        np.ndarray: The decoded image (2D uint8 for grayscale).
    
    Raises:
        FileNotFoundError: If the path does not exist.
        IOError: If OpenCV cannot decode the file.
    """
    path = str(path)
    if not os.path.exists(path):
        raise FileNotFoundError(f"File not found: {path}")
    
    # imread signals failure by returning None instead of raising
    image = cv2.imread(path, flags)
    if image is None:
        raise IOError(f"Unable to decode image: {path}")
    
    logger.debug(f"Loaded {path} with shape {image.shape}")
    return image


def save(path: Union[str, Path], image: np.ndarray) -> Path:
    """
    Writes an image to disk, overwriting any existing file.
    
    The format is picked by OpenCV from the file extension.
    
    Args:
        path: Destination path. The parent directory must exist.
        image: Image array (grayscale or BGR).
    
    Returns:
        Path: The written path.
    
    Raises:
        IOError: If OpenCV fails to encode or write the file.
    """
    path = Path(path)
    if not cv2.imwrite(str(path), image):
        raise IOError(f"Failed to write image: {path}")
    return path
