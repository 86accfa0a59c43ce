"""
Date and time format handling.

Formats are written as patterns made of repeated field letters, e.g.
``yyyy-mm-dd`` or ``yyyy-mm-ddTHH:MM:SS.s``. Patterns are translated once
into strptime directives and parsing is done by pandas. A pattern that
already contains ``%`` directives is used as-is.

Field letters:
    y  year (``yy`` is a two digit year)    m  month number
    u  abbreviated month name               U  full month name
    d  day of month                         H  hour (24h)
    M  minute                               S  second
    s  fractional seconds                   p  AM/PM marker
    e  abbreviated day name                 E  full day name

Any other character is a literal. A backslash makes the next character a
literal, so ``\\y`` matches a plain ``y``.
"""

import datetime
import re
from typing import Any, Callable, Dict, Optional, Tuple

import pandas as pd

from ..exceptions import InvalidFormatError, UnsupportedTypeError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

FIELD_DIRECTIVES = {
    'y': '%Y',
    'm': '%m',
    'u': '%b',
    'U': '%B',
    'd': '%d',
    'H': '%H',
    'M': '%M',
    'S': '%S',
    's': '%f',
    'p': '%p',
    'e': '%a',
    'E': '%A',
}

# No %z: offsets would make values tz-aware and incomparable with naive ones
STRPTIME_DIRECTIVES = set('YymbBdHIMSfpaAjUW%')

# pandas resolves these against the clock whatever the format
CLOCK_LITERALS = frozenset(['now', 'today'])

DIRECTIVE_PATTERN = re.compile(r'%(.?)')

# kind -> (default pattern, sentinel minimum, sentinel maximum)
TEMPORAL_KINDS: Dict[type, Tuple[str, Any, Any]] = {
    datetime.date: ('yyyy-mm-dd', datetime.date.min, datetime.date.max),
    datetime.datetime: ('yyyy-mm-ddTHH:MM:SS.s', pd.Timestamp.min, pd.Timestamp.max),
    datetime.time: ('HH:MM:SS.s', datetime.time.min, datetime.time.max),
}

KIND_NAMES = {
    'date': datetime.date,
    'datetime': datetime.datetime,
    'time': datetime.time,
}


def _translate_pattern(pattern: str) -> str:
    """Translate a field-letter pattern into strptime directives."""
    directives = []
    has_field = False
    i = 0

    while i < len(pattern):
        char = pattern[i]

        if char == '\\':
            if i + 1 == len(pattern):
                raise InvalidFormatError(f"Dangling escape at end of format {pattern!r}")
            literal = pattern[i + 1]
            directives.append('%%' if literal == '%' else literal)
            i += 2
            continue

        if char in FIELD_DIRECTIVES:
            run_end = i
            while run_end < len(pattern) and pattern[run_end] == char:
                run_end += 1
            if char == 'y' and run_end - i == 2:
                directives.append('%y')
            else:
                directives.append(FIELD_DIRECTIVES[char])
            has_field = True
            i = run_end
            continue

        directives.append(char)
        i += 1

    if not has_field:
        raise InvalidFormatError(f"Format {pattern!r} contains no date or time fields")

    return ''.join(directives)


def _check_strptime(pattern: str) -> str:
    """Validate a pattern that is already written with % directives."""
    directives = DIRECTIVE_PATTERN.findall(pattern)
    for directive in directives:
        if directive not in STRPTIME_DIRECTIVES:
            raise InvalidFormatError(f"Unknown directive %{directive} in format {pattern!r}")
    if all(directive == '%' for directive in directives):
        raise InvalidFormatError(f"Format {pattern!r} contains no date or time fields")
    return pattern


class DateFormat:
    """
    An immutable, pre-compiled date/time format.

    Attributes:
        pattern: The pattern as given
        strptime_format: The equivalent strptime format used for parsing

    Example:
        >>> fmt = DateFormat("yyyy-mm-dd")
        >>> fmt.strptime_format
        '%Y-%m-%d'
        >>> fmt.parse("1980-02-09")
        Timestamp('1980-02-09 00:00:00')
    """

    __slots__ = ('_pattern', '_strptime_format')

    def __init__(self, pattern: str):
        if not isinstance(pattern, str) or not pattern:
            logger.error(f"Rejected format pattern {pattern!r}")
            raise InvalidFormatError(f"Format pattern must be a non-empty string, got {pattern!r}")

        try:
            if '%' in pattern:
                strptime_format = _check_strptime(pattern)
            else:
                strptime_format = _translate_pattern(pattern)
        except InvalidFormatError as e:
            logger.error(f"Rejected format pattern {pattern!r}: {e}")
            raise

        self._pattern = pattern
        self._strptime_format = strptime_format
        logger.debug(f"Compiled date format {pattern!r} as {strptime_format!r}")

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def strptime_format(self) -> str:
        return self._strptime_format

    def parse(self, token: str) -> Optional[pd.Timestamp]:
        """
        Parse ``token`` exactly with this format.

        Returns:
            A pandas Timestamp, or ``None`` if the token does not match the
            format or falls outside the representable range
        """
        if token.strip().lower() in CLOCK_LITERALS:
            return None
        value = pd.to_datetime(token, format=self._strptime_format, exact=True, errors='coerce')
        if pd.isna(value):
            return None
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateFormat):
            return NotImplemented
        return self._strptime_format == other._strptime_format

    def __hash__(self) -> int:
        return hash(self._strptime_format)

    def __repr__(self) -> str:
        return f"DateFormat({self._pattern!r})"


def resolve_temporal_kind(kind: Any) -> type:
    """
    Normalize a temporal type specification.

    Args:
        kind: ``datetime.date``, ``datetime.datetime``, ``datetime.time``,
            ``pandas.Timestamp`` or one of the names ``'date'``,
            ``'datetime'``, ``'time'``

    Returns:
        One of the three ``datetime`` types

    Raises:
        UnsupportedTypeError: For any other value
    """
    if isinstance(kind, str) and kind in KIND_NAMES:
        return KIND_NAMES[kind]
    if kind is pd.Timestamp:
        return datetime.datetime
    if kind in TEMPORAL_KINDS:
        return kind

    logger.error(f"Cannot summarize values of temporal kind {kind!r}")
    raise UnsupportedTypeError(f"TimeRange needs date, datetime or time, got {kind!r}")


def default_format(kind: Any) -> DateFormat:
    """Return the canonical format for a temporal kind."""
    return DateFormat(TEMPORAL_KINDS[resolve_temporal_kind(kind)][0])


def temporal_bounds(kind: Any) -> Tuple[Any, Any]:
    """Return the smallest and largest representable values of a temporal kind."""
    _, lowest, highest = TEMPORAL_KINDS[resolve_temporal_kind(kind)]
    return lowest, highest


def _convert(value: pd.Timestamp, kind: type) -> Any:
    if kind is datetime.date:
        return value.date()
    if kind is datetime.time:
        return value.time()
    return value


def time_parser(kind: Any, dateformat: DateFormat) -> Callable[[str], Any]:
    """
    Build a parser producing values of ``kind`` from tokens in ``dateformat``.

    Example:
        >>> parse = time_parser('date', DateFormat("yyyy-mm-dd"))
        >>> parse("2000-01-01")
        datetime.date(2000, 1, 1)
        >>> parse("a fish") is None
        True
    """
    kind = resolve_temporal_kind(kind)

    def parse(token: str) -> Any:
        value = dateformat.parse(token)
        if value is None:
            return None
        return _convert(value, kind)

    return parse
