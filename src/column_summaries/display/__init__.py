"""
Presentation of summaries: percentage annotations and multi-line rendering.
"""

from .formatting import percentage_string, padded_count_percentages, bits_annotation
from .render import render

__all__ = [
    'percentage_string',
    'padded_count_percentages',
    'bits_annotation',
    'render',
]
