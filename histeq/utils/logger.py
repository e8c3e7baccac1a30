"""
Logging utilities for the HISTEQ applications.

The batch application and the ``histeq`` library logger share the same
console format so progress lines and library warnings read as one stream.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _console_handler(level: int, stream: Optional[TextIO] = None) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logger(name: str = "histeq_batch", level: int = logging.INFO,
                 stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Set up and return a configured logger.
    
    Calling it again for the same name returns the existing logger without
    adding a second handler.
    
    Args:
        name: Logger name
        level: Logging level (default: INFO)
        stream: Output stream (default: sys.stdout)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    
    if not logger.handlers:
        logger.setLevel(level)
        logger.addHandler(_console_handler(level, stream))
    
    return logger


def setup_app_logging(level: int = logging.INFO,
                      names: Iterable[str] = ("histeq_batch", "histeq")) -> None:
    """Attach the console handler to the application and library loggers."""
    for name in names:
        setup_logger(name, level)
