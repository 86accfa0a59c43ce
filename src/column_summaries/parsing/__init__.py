"""
Parsers used by the range summaries.
Every parser maps a token to a value, or to ``None`` when the token does not match.
"""

from .numbers import number_parser, resolve_numeric_dtype
from .dates import DateFormat, default_format, resolve_temporal_kind, temporal_bounds, time_parser

__all__ = [
    'number_parser',
    'resolve_numeric_dtype',
    'DateFormat',
    'default_format',
    'resolve_temporal_kind',
    'temporal_bounds',
    'time_parser',
]
