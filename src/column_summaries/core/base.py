"""
Summary capability contract.

Every summary parses and summarizes strings, one token at a time:

- ``capture`` offers a token and reports whether it was accepted
- ``count`` is the number of accepted tokens
- ``is_omnivore`` tells whether ``capture`` accepts everything
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from ..exceptions import IncompatibleSummaryError


class AbstractSummary(ABC):
    """
    Base class of all summaries.

    Subclasses implement :meth:`capture`, :meth:`count` and :meth:`merge`.
    A rejected token must leave the summary exactly as it was.
    """

    @abstractmethod
    def capture(self, token: str) -> bool:
        """If the summary can accept ``token``, do that and return True, otherwise False."""

    @abstractmethod
    def count(self) -> int:
        """Number of tokens accepted so far."""

    @property
    @abstractmethod
    def eltype(self) -> Any:
        """The type of the values this summary captures."""

    @abstractmethod
    def merge(self, other: 'AbstractSummary') -> 'AbstractSummary':
        """Fold ``other`` into this summary and return this summary."""

    def is_empty(self) -> bool:
        return self.count() == 0

    def is_omnivore(self) -> bool:
        """If ``capture`` always accepts, return True, otherwise False."""
        return False

    def _check_compatible(self, other: 'AbstractSummary') -> None:
        if type(other) is not type(self) or other.eltype != self.eltype:
            raise IncompatibleSummaryError(
                f"Cannot merge {type(other).__name__} of {other.eltype!r} "
                f"into {type(self).__name__} of {self.eltype!r}"
            )

    def __str__(self) -> str:
        from ..display.render import render
        return render(self)


class AbstractCounter(AbstractSummary):
    """
    Also count accepted elements individually.

    Entries are ranked by count in descending order. Calling :meth:`ranked`
    once is the most efficient way to access keys and counts together.
    """

    @abstractmethod
    def ranked(self):
        """All ``(key, count)`` pairs, highest count first."""

    def distinct_count(self) -> int:
        return len(self.ranked())

    def ranked_keys(self):
        return [key for key, _ in self.ranked()]

    def ranked_values(self):
        return [value for _, value in self.ranked()]


class AbstractRange(AbstractSummary):
    """
    Record the range of accepted elements.

    Subclasses keep ``_count``, ``_min`` and ``_max``. The bounds are only
    meaningful once something was captured, so the accessors return ``None``
    for an empty range whatever the fields hold.
    """

    _count: int
    _min: Any
    _max: Any

    def count(self) -> int:
        return self._count

    def min(self) -> Optional[Any]:
        return None if self._count == 0 else self._min

    def max(self) -> Optional[Any]:
        return None if self._count == 0 else self._max

    def extrema(self) -> Optional[Tuple[Any, Any]]:
        return None if self._count == 0 else (self._min, self._max)

    def merge(self, other: 'AbstractRange') -> 'AbstractRange':
        self._check_compatible(other)
        if other._count == 0:
            return self
        if self._count == 0:
            self._min, self._max = other._min, other._max
        else:
            self._min = min(self._min, other._min)
            self._max = max(self._max, other._max)
        self._count += other._count
        return self
