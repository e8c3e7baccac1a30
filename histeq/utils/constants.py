"""
HISTEQ Constants Module

Centralized location for the fixed parameters of the intensity transform
pipeline, the chart geometry and the output layout.

Transform Background
--------------------
The point transforms operate on intensities normalized to [0, 1]:

    log:    s = c * log(1 + r)
    gamma:  s = c * r ** gamma

and are min-max rescaled back to the full 8-bit range, so ``c`` only shapes
the curve before rescaling.

Usage
-----
    from histeq.utils.constants import GAMMA_VALUE, PLOT_WIDTH
"""

from typing import Tuple

# =============================================================================
# Point Transform Parameters
# =============================================================================

# Scaling constant for the logarithmic transform
LOG_C: float = 1.0

# Power-law (gamma) transform: s = GAMMA_C * r ** GAMMA_VALUE
# GAMMA_VALUE < 1 expands dark regions
GAMMA_C: float = 1.0
GAMMA_VALUE: float = 0.4


# =============================================================================
# Histogram / Equalization
# =============================================================================

HISTOGRAM_BINS: int = 256
MAX_INTENSITY: int = 255

# Contrast-limited adaptive equalization (OpenCV CLAHE)
CLAHE_CLIP_LIMIT: float = 2.0
CLAHE_TILE_GRID: Tuple[int, int] = (3, 3)


# =============================================================================
# Chart Geometry
# =============================================================================

# Plot area in pixels
PLOT_WIDTH: int = 512
PLOT_HEIGHT: int = 400

# Left/bottom offset of the axes inside the canvas
PLOT_OFFSET: int = 25

# Canvas is (PLOT_HEIGHT + CANVAS_PADDING) x (PLOT_WIDTH + CANVAS_PADDING)
CANVAS_PADDING: int = 50

# Tick spacing
INTENSITY_TICK_STEP: int = 64
HEIGHT_TICK_STEP: int = 100

# BGR colors
COLOR_WHITE: Tuple[int, int, int] = (255, 255, 255)
COLOR_BLACK: Tuple[int, int, int] = (0, 0, 0)
COLOR_CURVE: Tuple[int, int, int] = (0, 0, 255)


# =============================================================================
# Output Layout
# =============================================================================

DEFAULT_OUTPUT_DIR: str = "output"

HISTOGRAM_SUBDIR: str = "Histogramas"
IMAGE_SUBDIR: str = "Imagens_transformadas"
TRANSFORM_SUBDIR: str = "Funcoes_Transformacao"
LOCAL_EQ_SUBDIR: str = "EqualizacaoLocal"

OUTPUT_EXTENSION: str = ".png"


# =============================================================================
# Inputs
# =============================================================================

DEFAULT_INPUTS: Tuple[str, ...] = (
    "input/input1.tif",
    "input/input2.tif",
    "input/input3.tif",
)

# Only this input also receives local (adaptive) equalization
DEFAULT_LOCAL_EQ_INPUT: str = "input/input4.tif"

# Image shown by the viewer smoke-test
VIEWER_IMAGE: str = "teste.png"


# =============================================================================
# Module exports
# =============================================================================

__all__ = [
    'LOG_C',
    'GAMMA_C',
    'GAMMA_VALUE',
    'HISTOGRAM_BINS',
    'MAX_INTENSITY',
    'CLAHE_CLIP_LIMIT',
    'CLAHE_TILE_GRID',
    'PLOT_WIDTH',
    'PLOT_HEIGHT',
    'PLOT_OFFSET',
    'CANVAS_PADDING',
    'INTENSITY_TICK_STEP',
    'HEIGHT_TICK_STEP',
    'COLOR_WHITE',
    'COLOR_BLACK',
    'COLOR_CURVE',
    'DEFAULT_OUTPUT_DIR',
    'HISTOGRAM_SUBDIR',
    'IMAGE_SUBDIR',
    'TRANSFORM_SUBDIR',
    'LOCAL_EQ_SUBDIR',
    'OUTPUT_EXTENSION',
    'DEFAULT_INPUTS',
    'DEFAULT_LOCAL_EQ_INPUT',
    'VIEWER_IMAGE',
]
