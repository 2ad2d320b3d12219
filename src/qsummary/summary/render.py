"""
Project: QSummary
File Created: 2026-10-17
File Name: render.py
Description:
    Console rendering of a SummaryReport:

        Call: <call>

        pi0:	<pi0>

        Cumulative number of significant calls:

                   <0.01    <0.05
        p-value        1        2
        q-value        1        2
        local FDR      2        2
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from tabulate import tabulate

from qsummary.core.models import (
    DEFAULT_DIGITS,
    DEFAULT_THRESHOLDS,
    ROW_LABELS,
    AnalysisResult,
    SummaryReport,
    ThresholdTable,
)
from qsummary.summary.summarizer import summarize


def render_table(table: ThresholdTable) -> str:
    """Render the count table with right-aligned columns headed ``<cut``."""
    if not table.thresholds:
        return "\n".join(ROW_LABELS)

    rows = [[label, *table.rows[label]] for label in ROW_LABELS]
    return tabulate(
        rows,
        headers=["", *table.column_labels],
        tablefmt="plain",
        numalign="right",
        stralign="left",
    )


def render_report(report: SummaryReport) -> str:
    """Render the full summary text, ending with a newline."""
    lines = [
        f"Call: {report.call}",
        "",
        f"pi0:\t{report.pi0_text}",
        "",
        "Cumulative number of significant calls:",
        "",
        render_table(report.table),
        "",
    ]
    return "\n".join(lines)


def render_summary(
    result: AnalysisResult,
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS,
    digits: int = DEFAULT_DIGITS,
) -> str:
    """Summarize a result and return the rendered text."""
    return render_report(summarize(result, thresholds=thresholds, digits=digits))


def print_summary(
    result: AnalysisResult,
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS,
    digits: int = DEFAULT_DIGITS,
    file: TextIO | None = None,
) -> AnalysisResult:
    """Print the summary of a result and return the result unchanged.

    Nothing is printed if the result is invalid; the InvalidInputError
    propagates to the caller.
    """
    text = render_summary(result, thresholds=thresholds, digits=digits)
    print(text, end="", file=file if file is not None else sys.stdout)
    return result
