"""
Jobs - The images processed by the HISTEQ batch application.

Each input is described by an ImageJob record instead of its position in the
list, so the local equalization flag travels with the path it applies to.
"""

from dataclasses import dataclass
from typing import List

from ..utils.constants import DEFAULT_INPUTS, DEFAULT_LOCAL_EQ_INPUT


@dataclass(frozen=True)
class ImageJob:
    """One input image and whether it also gets local equalization."""
    path: str
    local_equalization: bool = False


def default_jobs() -> List[ImageJob]:
    """
    Get the fixed job list of the batch application.

    Returns:
        The three default inputs with global processing only, followed by
        the input that also receives local equalization.
    """
    jobs = [ImageJob(path) for path in DEFAULT_INPUTS]
    jobs.append(ImageJob(DEFAULT_LOCAL_EQ_INPUT, local_equalization=True))
    return jobs
