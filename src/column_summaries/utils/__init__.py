"""
Utility modules for column summaries.
Provides logging setup and bulk token feeding.
"""

from .logging_utils import setup_logger, get_logger
from .stream_utils import capture_all

__all__ = [
    'setup_logger',
    'get_logger',
    'capture_all',
]
