"""
Core models and errors shared across all QSummary modules.
"""

from qsummary.core.errors import InvalidInputError, QSummaryError
from qsummary.core.models import (
    DEFAULT_DIGITS,
    DEFAULT_OPTIONS,
    DEFAULT_THRESHOLDS,
    ROW_LABELS,
    AnalysisResult,
    SummaryOptions,
    SummaryReport,
    ThresholdTable,
)

__all__ = [
    "AnalysisResult",
    "DEFAULT_DIGITS",
    "DEFAULT_OPTIONS",
    "DEFAULT_THRESHOLDS",
    "InvalidInputError",
    "QSummaryError",
    "ROW_LABELS",
    "SummaryOptions",
    "SummaryReport",
    "ThresholdTable",
]
