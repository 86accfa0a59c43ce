"""
Column Summaries

Summarize a stream of string tokens, such as the values of one column of a
delimited file, without keeping the tokens themselves:

- StringCounter: frequency table of every distinct string
- NumRange: minimum and maximum of numeric tokens
- TimeRange: earliest and latest date/time tokens in a fixed format
- ChainedSummaries: offer each token to several summaries in priority order
"""

from .core import (
    AbstractSummary,
    AbstractCounter,
    AbstractRange,
    StringCounter,
    NumRange,
    TimeRange,
    ChainedSummaries,
)
from .parsing import DateFormat
from .exceptions import (
    ColumnSummariesError,
    InvalidFormatError,
    UnsupportedTypeError,
    IndexOutOfRangeError,
    IncompatibleSummaryError,
)
from .config import Config, get_config, build_chain
from .display import render
from .utils import capture_all

__version__ = "0.1.0"

__all__ = [
    'AbstractSummary',
    'AbstractCounter',
    'AbstractRange',
    'StringCounter',
    'NumRange',
    'TimeRange',
    'ChainedSummaries',
    'DateFormat',
    'ColumnSummariesError',
    'InvalidFormatError',
    'UnsupportedTypeError',
    'IndexOutOfRangeError',
    'IncompatibleSummaryError',
    'Config',
    'get_config',
    'build_chain',
    'render',
    'capture_all',
]
