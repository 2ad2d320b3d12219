"""
QSummary — printable summaries of q-value analyses.

Usage::

    from qsummary import AnalysisResult, summarize, print_summary

    result = AnalysisResult(pi0=0.8, pvalues=p, qvalues=q, lfdr=lfdr)
    report = summarize(result, thresholds=[0.01, 0.05], digits=3)
    report.table.to_frame()
    print_summary(result)
"""

from importlib.metadata import version
__version__ = version("qsummary")

# Core models
from qsummary.core.errors import InvalidInputError, QSummaryError
from qsummary.core.models import (
    DEFAULT_DIGITS,
    DEFAULT_OPTIONS,
    DEFAULT_THRESHOLDS,
    AnalysisResult,
    SummaryOptions,
    SummaryReport,
    ThresholdTable,
)

# Summaries
from qsummary.summary.render import print_summary, render_summary
from qsummary.summary.summarizer import count_significant, summarize, summarize_with_options

# Data loading convenience
from qsummary.data.loader import load_result, result_from_frame

__all__ = [
    # Core
    "AnalysisResult",
    "DEFAULT_DIGITS",
    "DEFAULT_OPTIONS",
    "DEFAULT_THRESHOLDS",
    "InvalidInputError",
    "QSummaryError",
    "SummaryOptions",
    "SummaryReport",
    "ThresholdTable",
    # Summaries
    "count_significant",
    "print_summary",
    "render_summary",
    "summarize",
    "summarize_with_options",
    # Data
    "load_result",
    "result_from_frame",
]
