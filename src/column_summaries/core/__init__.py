"""
Summaries that digest a stream of string tokens without keeping them.
"""

from .base import AbstractSummary, AbstractCounter, AbstractRange
from .counter import StringCounter
from .ranges import NumRange, TimeRange
from .chain import ChainedSummaries

__all__ = [
    'AbstractSummary',
    'AbstractCounter',
    'AbstractRange',
    'StringCounter',
    'NumRange',
    'TimeRange',
    'ChainedSummaries',
]
