#!/usr/bin/env python3
"""
HISTEQ - Viewer - Entry Point

Loads teste.png from the working directory and shows it until a key is
pressed. Used to check that OpenCV can decode images and open windows.

Exit codes:
    0  image shown
    1  image could not be loaded

Usage:
    python -m histeq_viewer.app
"""

import logging
import sys
from pathlib import Path
from typing import Union

import cv2

from histeq.loaders import load_image
from histeq.utils import setup_logger
from histeq.utils.constants import VIEWER_IMAGE

WINDOW_NAME = "Image"
EXIT_LOAD_FAILED = 1


def get_logger() -> logging.Logger:
    """Viewer logger, writing to the current stderr."""
    return setup_logger("histeq_viewer", stream=sys.stderr)


def main(path: Union[str, Path] = VIEWER_IMAGE) -> int:
    """Main entry point."""
    logger = get_logger()
    try:
        image = load_image(path, cv2.IMREAD_COLOR)
    except OSError as e:
        logger.error(f"Failed to load image: {e}")
        return EXIT_LOAD_FAILED
    
    logger.info("Image loaded successfully")
    cv2.imshow(WINDOW_NAME, image)
    cv2.waitKey(0)
    cv2.destroyAllWindows()
    return 0


if __name__ == "__main__":
    sys.exit(main())
