"""
HISTEQ Processing Module

Intensity transforms, histogram equalization and chart rendering.
"""

from .enhancement import (
    log_transform,
    gamma_transform,
    calc_histogram,
    global_equalization,
    local_equalization,
    calculate_transform_function,
)

from .visualization import (
    draw_histogram,
    draw_transform_function,
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
    # Charts
    'draw_histogram',
    'draw_transform_function',
]
