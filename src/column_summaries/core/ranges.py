"""
Range summaries: numeric and temporal min/max.

Both are selective. A token is only accepted if its type's parser matches
the whole token, and a rejected token leaves the range untouched.
"""

from typing import Any, Callable, Optional, Union

import numpy as np

from .base import AbstractRange
from ..parsing.dates import DateFormat, default_format, resolve_temporal_kind, temporal_bounds, time_parser
from ..parsing.numbers import number_parser, resolve_numeric_dtype
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


class NumRange(AbstractRange):
    """
    Record the minimum and maximum of numeric tokens.

    Args:
        numeric_type: ``int``, ``float`` or a numpy integer/floating dtype
        parser: Optional replacement parser, mapping a token to a value or
            ``None``. Defaults to strict parsing for ``numeric_type``.

    Example:
        >>> r = NumRange(int)
        >>> r.capture("3.14")
        False
        >>> r.capture("-9"), r.capture("11")
        (True, True)
        >>> r.extrema() == (-9, 11)
        True
    """

    def __init__(
        self,
        numeric_type: Any = int,
        parser: Optional[Callable[[str], Any]] = None
    ):
        self._dtype = resolve_numeric_dtype(numeric_type)
        self._parse = parser if parser is not None else number_parser(self._dtype)
        self._count = 0
        self._min = self._dtype.type(0)
        self._max = self._dtype.type(0)
        logger.debug(f"Created NumRange for {self._dtype}")

    @property
    def eltype(self) -> type:
        return self._dtype.type

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def capture(self, token: str) -> bool:
        value = self._parse(token)
        if value is None:
            return False
        if self._count == 0:
            self._min = value
            self._max = value
        else:
            self._min = min(self._min, value)
            self._max = max(self._max, value)
        self._count += 1
        return True

    def __repr__(self) -> str:
        return f"NumRange({self._dtype}, captured={self._count}, extrema={self.extrema()})"


class TimeRange(AbstractRange):
    """
    Record the earliest and latest date/time tokens in a fixed format.

    The format is chosen at construction and never changes. Tokens in any
    other format are rejected; no fallback formats are tried.

    Args:
        kind: ``datetime.date``, ``datetime.datetime``, ``datetime.time``
            (or ``'date'``, ``'datetime'``, ``'time'``)
        dateformat: A :class:`DateFormat` or a pattern string such as
            ``"yyyy-mm-dd"``. Defaults to the canonical format of ``kind``.

    Raises:
        InvalidFormatError: If the pattern cannot be understood

    Example:
        >>> r = TimeRange('date', "yyyy-mm-dd")
        >>> r.capture("2000-01-01"), r.capture("1980-02-09"), r.capture("a fish")
        (True, True, False)
        >>> r.min()
        datetime.date(1980, 2, 9)
    """

    def __init__(
        self,
        kind: Any = 'date',
        dateformat: Union[DateFormat, str, None] = None
    ):
        self._kind = resolve_temporal_kind(kind)
        if dateformat is None:
            dateformat = default_format(self._kind)
        elif isinstance(dateformat, str):
            dateformat = DateFormat(dateformat)
        self._dateformat = dateformat
        self._parse = time_parser(self._kind, dateformat)
        self._count = 0
        # Start inverted so the first capture sets both bounds
        self._max, self._min = temporal_bounds(self._kind)
        logger.debug(f"Created TimeRange for {self._kind.__name__} with {dateformat!r}")

    @property
    def eltype(self) -> type:
        return self._kind

    @property
    def dateformat(self) -> DateFormat:
        return self._dateformat

    def capture(self, token: str) -> bool:
        value = self._parse(token)
        if value is None:
            return False
        self._min = min(self._min, value)
        self._max = max(self._max, value)
        self._count += 1
        return True

    def __repr__(self) -> str:
        return (
            f"TimeRange({self._kind.__name__}, {self._dateformat.pattern!r}, "
            f"captured={self._count}, extrema={self.extrema()})"
        )
