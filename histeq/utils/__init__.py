"""
Utils package - Common utilities for HISTEQ applications.
"""

from .path_utils import (
    get_output_subdirs,
    ensure_output_dirs,
    get_file_stem,
    build_output_path,
)

from .logger import (
    setup_logger,
    setup_app_logging,
)

from .constants import (
    LOG_C,
    GAMMA_C,
    GAMMA_VALUE,
    CLAHE_CLIP_LIMIT,
    CLAHE_TILE_GRID,
    DEFAULT_OUTPUT_DIR,
)

__all__ = [
    # Path utilities
    "get_output_subdirs",
    "ensure_output_dirs",
    "get_file_stem",
    "build_output_path",
    # Logging
    "setup_logger",
    "setup_app_logging",
    # Pipeline constants
    "LOG_C",
    "GAMMA_C",
    "GAMMA_VALUE",
    "CLAHE_CLIP_LIMIT",
    "CLAHE_TILE_GRID",
    "DEFAULT_OUTPUT_DIR",
]
