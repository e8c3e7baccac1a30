"""
HISTEQ - Batch Processor

Applies the fixed intensity transform chain to a list of grayscale images and
writes transformed images, histogram charts and transfer-function charts.
"""
