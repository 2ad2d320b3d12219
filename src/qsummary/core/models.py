"""
Project: QSummary
File Created: 2026-10-17
File Name: models.py
Description:
    Core data models for q-value summaries.
    AnalysisResult is the read-only output of an upstream q-value
    estimation; ThresholdTable and SummaryReport are built fresh on every
    summarize() call.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

# Row labels of the cumulative-count table, in display order
ROW_LABELS: tuple[str, ...] = ("p-value", "q-value", "local FDR")

# Default significance cuts
DEFAULT_THRESHOLDS: tuple[float, ...] = (0.0001, 0.001, 0.01, 0.025, 0.05, 0.10, 1)

# Significant digits used for pi0 when the caller gives none
DEFAULT_DIGITS = 7


def is_missing(value: float | None) -> bool:
    """True for the missing sentinel (None), NaN and pandas' NA."""
    if value is None:
        return True
    return bool(pd.api.types.is_scalar(value) and pd.isna(value))


def format_threshold(threshold: float) -> str:
    """Column header for a threshold, e.g. ``0.05 -> '<0.05'``."""
    return f"<{threshold:.15g}"


@dataclass(frozen=True)
class AnalysisResult:
    """Result of a multiple-testing analysis (pi0, q-values, local FDR).

    The three score sequences are index-aligned: position i in each refers
    to the same hypothesis. Missing entries are ``None``, NaN or ``pd.NA``.
    """

    pi0: float | None
    pvalues: Sequence[float | None]
    qvalues: Sequence[float | None]
    lfdr: Sequence[float | None]
    call: str = ""

    @property
    def n_hypotheses(self) -> int:
        return len(self.pvalues)


@dataclass(frozen=True)
class SummaryOptions:
    """Thresholds and display precision for a summary.

    ``digits`` only affects how pi0 is printed, never the counting.
    """

    thresholds: tuple[float, ...] = DEFAULT_THRESHOLDS
    digits: int = DEFAULT_DIGITS


# Default options — used when no overrides are supplied.
DEFAULT_OPTIONS = SummaryOptions()


@dataclass(frozen=True)
class ThresholdTable:
    """Cumulative number of significant calls per score type and threshold."""

    thresholds: tuple[float, ...]
    counts: tuple[tuple[str, tuple[int, ...]], ...] = ()
    n_valid: int = 0
    n_total: int = 0

    @property
    def rows(self) -> dict[str, tuple[int, ...]]:
        """Row label → counts aligned with ``thresholds``."""
        return dict(self.counts)

    @property
    def column_labels(self) -> list[str]:
        return [format_threshold(t) for t in self.thresholds]

    @property
    def n_excluded(self) -> int:
        """Hypotheses dropped because their p-value is missing."""
        return self.n_total - self.n_valid

    def count(self, label: str, threshold: float) -> int:
        """Count for one cell.

        Raises:
            KeyError: If the label or threshold is not part of the table.
        """
        if label not in self.rows:
            raise KeyError(label)
        for t, n in zip(self.thresholds, self.rows[label]):
            if t == threshold:
                return n
        raise KeyError(threshold)

    def to_frame(self) -> pd.DataFrame:
        """The table as a DataFrame: one row per score type, one column per cut."""
        return pd.DataFrame(
            [list(self.rows[label]) for label in ROW_LABELS],
            index=list(ROW_LABELS),
            columns=self.column_labels,
            dtype="int64",
        )


@dataclass(frozen=True)
class SummaryReport:
    """Printable summary of an AnalysisResult."""

    call: str
    pi0: float
    pi0_text: str
    digits: int
    table: ThresholdTable

    def render(self) -> str:
        from qsummary.summary.render import render_report

        return render_report(self)

    def __str__(self) -> str:
        return self.render()
