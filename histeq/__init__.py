"""
HISTEQ - Grayscale Histogram Equalization Toolkit

Shared library of the HISTEQ batch processor and viewer: image loading,
intensity transforms, histogram equalization and chart rendering.
"""

__version__ = '1.0.0'
