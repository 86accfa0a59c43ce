"""
Feeding many tokens to a summary at once.
"""

from typing import Any, Iterable, Optional

import pandas as pd
from tqdm import tqdm

from ..core.base import AbstractSummary
from .logging_utils import get_logger

logger = get_logger(__name__)


def capture_all(
    summary: AbstractSummary,
    tokens: Iterable[Any],
    progress: Optional[bool] = None,
    desc: str = "Capturing tokens"
) -> int:
    """
    Offer every token in ``tokens`` to ``summary``.

    Missing values (``None`` and NaN, as pandas produces for empty cells) are
    skipped rather than offered. Other non-string values are offered as
    ``str(value)``.

    Args:
        summary: Summary to feed
        tokens: Any iterable of tokens, e.g. a list or a pandas Series
        progress: Show a tqdm progress bar (default: ``stream.progress``
            from the configuration)
        desc: Progress bar label

    Returns:
        Number of tokens the summary accepted

    Example:
        >>> chain = ChainedSummaries(NumRange(int), StringCounter())
        >>> capture_all(chain, ["1", "-9", "NaN", "a fish"])
        4
    """
    if progress is None:
        from ..config import get_config
        progress = bool(get_config().get('stream.progress', False))

    offered = 0
    accepted = 0
    skipped = 0

    for token in tqdm(tokens, desc=desc, disable=not progress):
        if not isinstance(token, str):
            if token is None or (pd.api.types.is_scalar(token) and pd.isna(token)):
                skipped += 1
                continue
            token = str(token)
        offered += 1
        if summary.capture(token):
            accepted += 1

    logger.debug(f"Offered {offered} tokens, accepted {accepted}, skipped {skipped} missing")

    if offered and accepted < offered:
        logger.info(f"{type(summary).__name__} rejected {offered - accepted} of {offered} tokens")

    return accepted
