#!/usr/bin/env python3
"""
HISTEQ - Batch Processor - Entry Point

Runs the intensity transform pipeline over the fixed list of grayscale images
(input/input1.tif ... input/input4.tif, only the last one with local
equalization) and writes results under ./output.

Usage:
    python -m histeq_batch.app
"""

import sys

from histeq.config import default_jobs
from histeq.utils import DEFAULT_OUTPUT_DIR, setup_logger, setup_app_logging

from histeq_batch.core import run_batch

logger = setup_logger("histeq_batch")


def main() -> int:
    """Main entry point."""
    setup_app_logging()
    logger.info("Starting batch processing")
    
    jobs = default_jobs()
    results = run_batch(jobs, DEFAULT_OUTPUT_DIR)
    
    logger.info(f"Processing complete for all images ({len(results)}/{len(jobs)} succeeded)")
    
    # Decode failures are reported per image and do not change the exit code
    return 0


if __name__ == "__main__":
    sys.exit(main())
