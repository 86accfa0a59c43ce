"""
Frequency table summary.
"""

from collections import Counter
from typing import List, Tuple, Type

from .base import AbstractCounter
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class StringCounter(AbstractCounter):
    """
    Count every distinct string. Accepts everything.

    Ties in :meth:`ranked` are broken by key in ascending order, so the
    ranking only depends on the final counts and never on capture order.

    Example:
        >>> s = StringCounter()
        >>> for token in ["foo", "bar", "foo", "bar", "bar", "bar"]:
        ...     s.capture(token)
        >>> s.ranked()
        [('bar', 4), ('foo', 2)]
    """

    def __init__(self, string_type: Type[str] = str):
        if not (isinstance(string_type, type) and issubclass(string_type, str)):
            raise TypeError(f"StringCounter needs a str type, got {string_type!r}")
        self._string_type = string_type
        self._counts: Counter = Counter()

    @property
    def eltype(self) -> Type[str]:
        return self._string_type

    def is_omnivore(self) -> bool:
        return True

    def capture(self, token: str) -> bool:
        self._counts[token] += 1
        return True

    def count(self) -> int:
        return sum(self._counts.values())

    def distinct_count(self) -> int:
        return len(self._counts)

    def ranked(self) -> List[Tuple[str, int]]:
        return sorted(self._counts.items(), key=lambda item: (-item[1], item[0]))

    def merge(self, other: 'StringCounter') -> 'StringCounter':
        self._check_compatible(other)
        self._counts.update(other._counts)
        logger.debug(f"Merged {other.distinct_count()} distinct strings into counter")
        return self

    def __repr__(self) -> str:
        return f"StringCounter(captured={self.count()}, distinct={self.distinct_count()})"
