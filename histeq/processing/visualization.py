"""
Visualization Module for Intensity Histograms

This module renders histogram and transfer-function charts as BGR images using
OpenCV drawing primitives, ready to be written to disk.

Both charts share one layout: a white canvas of
(height + CANVAS_PADDING) x (width + CANVAS_PADDING) pixels with the axes
offset PLOT_OFFSET pixels from the left edge and drawn along the bottom of
the plot area.

Usage:
------
    from histeq.processing.visualization import draw_histogram
    
    chart = draw_histogram(calc_histogram(image), "Original")
    cv2.imwrite("hist.png", chart)
"""

from typing import Sequence, Tuple

import cv2
import numpy as np

from ..utils.constants import (
    PLOT_WIDTH,
    PLOT_HEIGHT,
    PLOT_OFFSET,
    CANVAS_PADDING,
    HISTOGRAM_BINS,
    INTENSITY_TICK_STEP,
    HEIGHT_TICK_STEP,
    COLOR_WHITE,
    COLOR_BLACK,
    COLOR_CURVE,
)

FONT = cv2.FONT_HERSHEY_SIMPLEX
LABEL_SCALE = 0.4
TITLE_SCALE = 0.8
TITLE_ORIGIN = (50, 30)


def _new_canvas(width: int, height: int) -> np.ndarray:
    """White BGR canvas covering the plot area plus padding."""
    return np.full((height + CANVAS_PADDING, width + CANVAS_PADDING, 3),
                   COLOR_WHITE, dtype=np.uint8)


def _draw_axes(canvas: np.ndarray, width: int, height: int) -> None:
    cv2.line(canvas, (PLOT_OFFSET, height), (width + PLOT_OFFSET, height),
             COLOR_BLACK, 1, cv2.LINE_AA)
    cv2.line(canvas, (PLOT_OFFSET, 0), (PLOT_OFFSET, height),
             COLOR_BLACK, 1, cv2.LINE_AA)


def _draw_label(canvas: np.ndarray, text: str, origin: Tuple[int, int]) -> None:
    cv2.putText(canvas, text, origin, FONT, LABEL_SCALE, COLOR_BLACK, 1)


def _draw_intensity_ticks(canvas: np.ndarray, width: int, height: int, stop: int) -> None:
    """Label intensities 0, 64, ... below the X axis, spread over the full plot width."""
    for i in range(0, stop, INTENSITY_TICK_STEP):
        x = int(round(i * width / HISTOGRAM_BINS)) + PLOT_OFFSET - 5
        _draw_label(canvas, str(i), (x, height + 20))


def _draw_title(canvas: np.ndarray, title: str) -> None:
    cv2.putText(canvas, title, TITLE_ORIGIN, FONT, TITLE_SCALE, COLOR_BLACK, 2)


def _draw_polyline(canvas: np.ndarray, ys: np.ndarray, bin_w: int,
                   height: int, thickness: int) -> None:
    """Connect consecutive (i, ys[i]) points, y measured up from the X axis."""
    for i in range(1, len(ys)):
        p1 = (bin_w * (i - 1) + PLOT_OFFSET, height - int(ys[i - 1]))
        p2 = (bin_w * i + PLOT_OFFSET, height - int(ys[i]))
        cv2.line(canvas, p1, p2, COLOR_CURVE, thickness, cv2.LINE_AA)


def draw_histogram(hist: Sequence[float], title: str,
                   width: int = PLOT_WIDTH, height: int = PLOT_HEIGHT) -> np.ndarray:
    """
    Render a histogram as a connected line chart.
    
    Bin heights are min-max rescaled to [0, height] on a copy of ``hist``, so
    the chart shows the shape of the distribution rather than absolute counts.
    The input is left untouched.
    
    Parameters
    ----------
    hist : array-like
        Bin counts, typically the 256 values of calc_histogram().
    title : str
        Text drawn in the top-left corner.
    width, height : int, optional
        Size of the plot area in pixels. Default is 512 x 400.
    
    Returns
    -------
    np.ndarray
        uint8 BGR image of shape (height + 50, width + 50, 3).
    """
    values = np.asarray(hist, dtype=np.float32).ravel()
    if values.size < 2:
        raise ValueError("histogram must have at least 2 bins")
    
    scaled = cv2.normalize(values, None, 0, height, cv2.NORM_MINMAX).ravel()
    ys = np.rint(scaled).astype(np.int64)
    bin_w = int(round(width / values.size))
    
    canvas = _new_canvas(width, height)
    _draw_polyline(canvas, ys, bin_w, height, thickness=1)
    _draw_axes(canvas, width, height)
    
    _draw_intensity_ticks(canvas, width, height, HISTOGRAM_BINS + 1)
    for i in range(0, height + 1, HEIGHT_TICK_STEP):
        _draw_label(canvas, str(height - i), (5, i + 5))
    
    _draw_title(canvas, title)
    return canvas


def draw_transform_function(table: Sequence[int], title: str,
                            width: int = PLOT_WIDTH, height: int = PLOT_HEIGHT) -> np.ndarray:
    """
    Render an intensity transfer function.
    
    X axis is the input intensity, Y axis the output intensity. Values are
    plotted as-is (expected in [0, 255]); higher output draws higher.
    
    Parameters
    ----------
    table : array-like
        Output intensity for each input intensity, typically the result of
        calculate_transform_function().
    title : str
        Text drawn in the top-left corner.
    width, height : int, optional
        Size of the plot area in pixels. Default is 512 x 400.
    
    Returns
    -------
    np.ndarray
        uint8 BGR image of shape (height + 50, width + 50, 3).
    """
    values = np.asarray(table, dtype=np.int64).ravel()
    if values.size < 2:
        raise ValueError("transfer function must have at least 2 entries")
    
    bin_w = int(round(width / values.size))
    
    canvas = _new_canvas(width, height)
    _draw_polyline(canvas, values, bin_w, height, thickness=2)
    _draw_axes(canvas, width, height)
    
    _draw_intensity_ticks(canvas, width, height, HISTOGRAM_BINS)
    for i in range(0, HISTOGRAM_BINS, INTENSITY_TICK_STEP):
        _draw_label(canvas, str(i), (5, height - i + 5))
    
    _draw_title(canvas, title)
    return canvas


__all__ = [
    'draw_histogram',
    'draw_transform_function',
]
