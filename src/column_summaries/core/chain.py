"""
Chained summaries: try several summaries in priority order.
"""

from typing import Iterator, Tuple

from .base import AbstractSummary
from ..exceptions import IncompatibleSummaryError, IndexOutOfRangeError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class ChainedSummaries(AbstractSummary):
    """
    Offer each token to the members in order; the first one to accept it wins.

    Members after the accepting one never see the token. Putting selective
    summaries before an omnivorous one gives a "typed if possible, otherwise
    free text" classifier in a single pass.

    The chain owns its members. They are fixed at construction and indexed
    from 0.

    Example:
        >>> c = ChainedSummaries(NumRange(int), StringCounter())
        >>> for token in ["1", "-9", "NaN", "NaN", "a fish"]:
        ...     c.capture(token)
        >>> c.count(), c[0].count(), c[1].count()
        (5, 2, 3)
    """

    def __init__(self, *summaries: AbstractSummary):
        if len(summaries) == 1 and isinstance(summaries[0], (tuple, list)):
            summaries = tuple(summaries[0])
        if not summaries:
            raise ValueError("ChainedSummaries needs at least one summary")
        for summary in summaries:
            if not isinstance(summary, AbstractSummary):
                raise TypeError(f"Chain members must be summaries, got {type(summary).__name__}")
        self._chain: Tuple[AbstractSummary, ...] = tuple(summaries)
        logger.debug(f"Created chain of {', '.join(type(s).__name__ for s in self._chain)}")

    @property
    def eltype(self) -> Tuple:
        return tuple(summary.eltype for summary in self._chain)

    def is_omnivore(self) -> bool:
        return any(summary.is_omnivore() for summary in self._chain)

    def capture(self, token: str) -> bool:
        for summary in self._chain:
            if summary.capture(token):
                return True
        return False

    def count(self) -> int:
        return sum(summary.count() for summary in self._chain)

    def get(self, index: int) -> AbstractSummary:
        """
        Return the member at ``index`` (0-based).

        Raises:
            IndexOutOfRangeError: If ``index`` is negative or past the end
        """
        if not 0 <= index < len(self._chain):
            raise IndexOutOfRangeError(
                f"Chain index {index} out of range for {len(self._chain)} members"
            )
        return self._chain[index]

    def length(self) -> int:
        return len(self._chain)

    def merge(self, other: 'ChainedSummaries') -> 'ChainedSummaries':
        if not isinstance(other, ChainedSummaries) or other.length() != self.length():
            raise IncompatibleSummaryError("Only chains of the same length can be merged")
        pairs = list(zip(self._chain, other._chain))
        # Check every member up front so a mismatch leaves the chain untouched
        for mine, theirs in pairs:
            mine._check_compatible(theirs)
        for mine, theirs in pairs:
            mine.merge(theirs)
        return self

    def __getitem__(self, index: int) -> AbstractSummary:
        return self.get(index)

    def __len__(self) -> int:
        return len(self._chain)

    def __iter__(self) -> Iterator[AbstractSummary]:
        return iter(self._chain)

    def __repr__(self) -> str:
        members = ', '.join(repr(summary) for summary in self._chain)
        return f"ChainedSummaries({members})"
