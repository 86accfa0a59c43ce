"""
Small formatting helpers for rendering summaries.
"""

import datetime
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd


def percentage_string(count: int, total: int) -> str:
    """
    Summarize ``count / total`` as a percentage in exactly 3 characters.

    Example:
        >>> [percentage_string(c, 200) for c in (0, 1, 10, 100, 200)]
        [' ∅ ', '<1%', ' 5%', '50%', 'all']
    """
    if count == 0:
        return ' ∅ '
    if count == total:
        return 'all'
    ratio = count / total
    if ratio < 0.01:
        return '<1%'
    return f"{round(ratio * 100)}%".rjust(3)


def padded_count_percentages(counts: Sequence[int], total: Optional[int] = None) -> List[str]:
    """
    Convert counts to strings with percentages, padded to the same width.

    Args:
        counts: Counts to format
        total: Denominator for the percentages (default: sum of ``counts``)

    Returns:
        One string per count, e.g. ``['4 (67%)', '2 (33%)']``
    """
    if len(counts) == 0:
        return []
    if total is None:
        total = sum(counts)
    count_strings = [str(c) for c in counts]
    width = max(len(s) for s in count_strings)
    return [
        f"{s.rjust(width)} ({percentage_string(c, total)})"
        for s, c in zip(count_strings, counts)
    ]


def bits_annotation(n: int) -> str:
    """Annotate how many binary digits are needed to represent ``n``."""
    return f" [≤{max(abs(int(n)).bit_length(), 1)} bits]"


def _time_of_day(value: datetime.time) -> int:
    return ((value.hour * 60 + value.minute) * 60 + value.second) * 1_000_000 + value.microsecond


def span(lowest: Any, highest: Any) -> int:
    """
    Number of distinct values from ``lowest`` to ``highest`` inclusive.

    Dates count days; datetimes and times count nanoseconds.
    """
    if isinstance(lowest, datetime.datetime):
        return (pd.Timestamp(highest) - pd.Timestamp(lowest)).value + 1
    if isinstance(lowest, datetime.date):
        return (highest - lowest).days + 1
    if isinstance(lowest, datetime.time):
        return (_time_of_day(highest) - _time_of_day(lowest)) * 1_000 + 1
    return int(highest) - int(lowest) + 1


def format_value(value: Any) -> str:
    """Render a captured value the way a reader would type it."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    return str(value)
