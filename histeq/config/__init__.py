"""
Config package - Batch job records for HISTEQ.
"""

from .jobs import ImageJob, default_jobs

__all__ = [
    "ImageJob",
    "default_jobs",
]
