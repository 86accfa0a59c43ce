"""
Exceptions raised by column summaries.

Rejecting a token is never an error: ``capture`` returns ``False`` instead.
These exceptions cover programmer and configuration mistakes only.
"""


class ColumnSummariesError(Exception):
    """Base class for all errors raised by this package."""


class InvalidFormatError(ColumnSummariesError, ValueError):
    """A date/time format pattern could not be understood."""


class UnsupportedTypeError(ColumnSummariesError, TypeError):
    """A range was asked to summarize a type it has no parser for."""


class IndexOutOfRangeError(ColumnSummariesError, IndexError):
    """A chain member was requested at a position outside the chain."""


class IncompatibleSummaryError(ColumnSummariesError, ValueError):
    """Two summaries of different kinds or types were merged."""
