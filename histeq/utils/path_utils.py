"""
Path Utilities - Output directory layout and file naming for HISTEQ.
"""

from pathlib import Path
from typing import Dict, Union

from .constants import (
    HISTOGRAM_SUBDIR,
    IMAGE_SUBDIR,
    TRANSFORM_SUBDIR,
    LOCAL_EQ_SUBDIR,
    OUTPUT_EXTENSION,
)


def get_output_subdirs(output_dir: Union[str, Path],
                       include_local: bool = False) -> Dict[str, Path]:
    """
    Get the output subdirectories for one base output directory.
    
    Args:
        output_dir: Base output directory.
        include_local: Also include the local equalization directory.
    
    Returns:
        Mapping of category ("histograms", "images", "transforms",
        and optionally "local") to directory path.
    """
    base = Path(output_dir)
    subdirs = {
        "histograms": base / HISTOGRAM_SUBDIR,
        "images": base / IMAGE_SUBDIR,
        "transforms": base / TRANSFORM_SUBDIR,
    }
    if include_local:
        subdirs["local"] = base / LOCAL_EQ_SUBDIR
    return subdirs


def ensure_output_dirs(output_dir: Union[str, Path],
                       include_local: bool = False) -> Dict[str, Path]:
    """
    Ensure the output subdirectories exist.
    
    Safe to call repeatedly; existing directories are left untouched.
    
    Returns:
        Same mapping as get_output_subdirs().
    """
    subdirs = get_output_subdirs(output_dir, include_local)
    for directory in subdirs.values():
        directory.mkdir(parents=True, exist_ok=True)
    return subdirs


def get_file_stem(path: Union[str, Path]) -> str:
    """
    Get the filename of a path without directory and extension.
    
    Args:
        path: File path.
    
    Returns:
        Stem, e.g. "input1" for "input/input1.tif".
    """
    return Path(path).stem


def build_output_path(directory: Union[str, Path], stem: str, suffix: str) -> Path:
    """Build ``<directory>/<stem>_<suffix>.png``."""
    return Path(directory) / f"{stem}_{suffix}{OUTPUT_EXTENSION}"
