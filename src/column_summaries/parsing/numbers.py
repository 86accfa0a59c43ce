"""
Strict string to number parsing.

A token is accepted only when the whole of it is a literal of the target
dtype. Anything else yields ``None`` rather than an exception, so ranges can
offer every token of a column without guarding each call.
"""

import re
from typing import Any, Callable, Optional

import numpy as np

from ..exceptions import UnsupportedTypeError
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

NumberParser = Callable[[str], Optional[np.generic]]

INTEGER_LITERAL = re.compile(r'[+-]?[0-9]+')

# NaN is deliberately absent: it has no place in a min/max ordering
FLOAT_LITERAL = re.compile(
    r'[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity)',
    re.IGNORECASE
)


def resolve_numeric_dtype(numeric_type: Any) -> np.dtype:
    """
    Normalize a numeric type specification to a numpy dtype.

    Args:
        numeric_type: ``int``, ``float``, a numpy scalar type, a dtype or a
            dtype name such as ``'int32'``

    Returns:
        The matching integer or floating numpy dtype

    Raises:
        UnsupportedTypeError: If the type is not an integer or floating type

    Example:
        >>> resolve_numeric_dtype(int)
        dtype('int64')
    """
    if numeric_type is None:
        logger.error("NumRange needs a numeric type, got None")
        raise UnsupportedTypeError("Not a numeric type: None")
    if numeric_type is int:
        return np.dtype(np.int64)
    if numeric_type is float:
        return np.dtype(np.float64)

    try:
        dtype = np.dtype(numeric_type)
    except TypeError as e:
        logger.error(f"Cannot interpret {numeric_type!r} as a numeric dtype")
        raise UnsupportedTypeError(f"Not a numeric type: {numeric_type!r}") from e

    if dtype.kind not in 'iuf':
        logger.error(f"Dtype {dtype} is neither integer nor floating")
        raise UnsupportedTypeError(f"NumRange needs an integer or floating type, got {dtype}")

    return dtype


def parse_integer(token: str, dtype: np.dtype) -> Optional[np.generic]:
    """
    Parse ``token`` as an integer of ``dtype``.

    Returns ``None`` if the token is not a plain decimal integer or does not
    fit in the dtype.
    """
    if not INTEGER_LITERAL.fullmatch(token):
        return None

    bounds = np.iinfo(dtype)
    # More significant digits than the widest bound cannot fit, and int()
    # refuses very long digit strings
    digits = token.lstrip('+-').lstrip('0')
    if len(digits) > len(str(max(-int(bounds.min), int(bounds.max)))):
        return None

    value = int(digits) if digits else 0
    if token.startswith('-'):
        value = -value
    if value < bounds.min or value > bounds.max:
        return None

    return dtype.type(value)


def parse_floating(token: str, dtype: np.dtype) -> Optional[np.generic]:
    """
    Parse ``token`` as a floating point number of ``dtype``.

    Literals too large for the dtype become infinities. NaN is rejected.
    """
    if not FLOAT_LITERAL.fullmatch(token):
        return None

    with np.errstate(over='ignore'):
        return dtype.type(token)


def number_parser(numeric_type: Any) -> NumberParser:
    """
    Build a strict parser for a numeric type.

    Args:
        numeric_type: Anything accepted by :func:`resolve_numeric_dtype`

    Returns:
        Callable mapping a token to a numpy scalar, or ``None`` on no match

    Example:
        >>> parse = number_parser(int)
        >>> parse("-9")
        -9
        >>> parse("3.14") is None
        True
    """
    dtype = resolve_numeric_dtype(numeric_type)

    if dtype.kind == 'f':
        return lambda token: parse_floating(token, dtype)

    return lambda token: parse_integer(token, dtype)
