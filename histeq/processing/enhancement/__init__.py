"""
HISTEQ Image Enhancement Module

Point transforms and histogram equalization for 8-bit grayscale images.

Usage:
    from histeq.processing.enhancement import log_transform, global_equalization
    
    # Brighten dark regions
    brightened = log_transform(image)
    
    # Enhance contrast
    equalized = global_equalization(image)
    
    # CLAHE (adaptive contrast enhancement)
    local = local_equalization(image, clip_limit=2.0)
"""

from .intensity import (
    log_transform,
    gamma_transform,
    calc_histogram,
    global_equalization,
    local_equalization,
    calculate_transform_function,
)

__all__ = [
    # Point transforms
    'log_transform',
    'gamma_transform',
    # Histogram and equalization
    'calc_histogram',
    'global_equalization',
    'local_equalization',
    'calculate_transform_function',
]
