"""
HISTEQ - Batch Manager - Runs the fixed transform chain over a list of images.

For every input image the manager writes:
- the original and its log, gamma and globally equalized variants,
- a histogram chart of each of those four images,
- a chart of the equalization transfer function of the original,
- optionally, a locally (CLAHE) equalized variant.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from histeq.config import ImageJob
from histeq.loaders import load_image, save_image
from histeq.processing import (
    log_transform,
    gamma_transform,
    calc_histogram,
    global_equalization,
    local_equalization,
    calculate_transform_function,
    draw_histogram,
    draw_transform_function,
)
from histeq.utils import (
    setup_logger,
    ensure_output_dirs,
    get_file_stem,
    build_output_path,
    LOG_C,
    GAMMA_C,
    GAMMA_VALUE,
    DEFAULT_OUTPUT_DIR,
)

logger = setup_logger("histeq_batch")

# variant key -> (image suffix, histogram suffix, chart title)
VARIANTS = {
    "original": ("original", "hist_original", "Original"),
    "log": ("log_transform", "hist_log", "Log Transformation"),
    "gamma": ("gamma_transform", "hist_gamma", "Gamma Transformation"),
    "eq": ("global_equalization", "hist_eq", "Global Equalization"),
}

TRANSFORM_SUFFIX = "funcao_transformacao_eq"
TRANSFORM_TITLE = "Funcao de Transformacao Equalizacao"
LOCAL_EQ_SUFFIX = "local_equalization"


@dataclass
class ProcessResult:
    """Outcome of processing one image."""
    source: str                              # Input path
    stem: str                                # Output file prefix
    images: Dict[str, np.ndarray]            # Variant key -> image
    histograms: Dict[str, np.ndarray]        # Variant key -> 256 bin counts
    transform: np.ndarray                    # Equalization transfer function
    written: List[Path] = field(default_factory=list)

    @property
    def has_local_equalization(self) -> bool:
        return "local" in self.images


def compute_variants(image: np.ndarray) -> Dict[str, np.ndarray]:
    """Apply the fixed transform chain; keys follow VARIANTS."""
    return {
        "original": image,
        "log": log_transform(image, LOG_C),
        "gamma": gamma_transform(image, GAMMA_C, GAMMA_VALUE),
        "eq": global_equalization(image),
    }


def process_image(job: ImageJob,
                  output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> Optional[ProcessResult]:
    """
    Process one input image and write all of its outputs.

    An image that cannot be decoded is reported and skipped: nothing is
    written for it and None is returned. Any failure while writing outputs
    propagates to the caller.

    Args:
        job: Input path and local equalization flag.
        output_dir: Base output directory.

    Returns:
        ProcessResult, or None if the image could not be opened.
    """
    try:
        image = load_image(job.path)
    except OSError as e:
        logger.error(f"Failed to open image: {job.path} ({e})")
        return None

    stem = get_file_stem(job.path)
    dirs = ensure_output_dirs(output_dir, include_local=job.local_equalization)

    images = compute_variants(image)
    histograms = {key: calc_histogram(variant) for key, variant in images.items()}
    charts = {key: draw_histogram(histograms[key], VARIANTS[key][2]) for key in VARIANTS}

    written = []
    for key, (image_suffix, _, _) in VARIANTS.items():
        path = build_output_path(dirs["images"], stem, image_suffix)
        written.append(save_image(path, images[key]))

    for key, (_, hist_suffix, _) in VARIANTS.items():
        path = build_output_path(dirs["histograms"], stem, hist_suffix)
        written.append(save_image(path, charts[key]))

    transform = calculate_transform_function(image)
    transform_chart = draw_transform_function(transform, TRANSFORM_TITLE)
    written.append(save_image(build_output_path(dirs["transforms"], stem, TRANSFORM_SUFFIX),
                              transform_chart))

    logger.info(f"Processing finished for: {job.path}")

    result = ProcessResult(
        source=job.path,
        stem=stem,
        images=images,
        histograms=histograms,
        transform=transform,
        written=written,
    )

    if job.local_equalization:
        local = local_equalization(image)
        result.images["local"] = local
        path = build_output_path(dirs["local"], stem, LOCAL_EQ_SUFFIX)
        result.written.append(save_image(path, local))
        logger.info(f"Local equalization finished for: {job.path}")

    return result


def run_batch(jobs: Iterable[ImageJob],
              output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> List[ProcessResult]:
    """
    Process every job in order.

    Images that fail to decode are skipped; the batch continues with the
    next job.

    Returns:
        Results of the images that were processed.
    """
    Path(output_dir).mkdir(parents=True, exist_ok=True)

    results = []
    for job in jobs:
        result = process_image(job, output_dir)
        if result is not None:
            results.append(result)

    return results
