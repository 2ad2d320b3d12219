"""Exceptions raised by QSummary."""

from __future__ import annotations


class QSummaryError(Exception):
    """Base class for all QSummary errors."""


class InvalidInputError(QSummaryError, ValueError):
    """The result object, thresholds or input table cannot be summarized.

    Raised before any report is built; a partial table is never returned.
    """
