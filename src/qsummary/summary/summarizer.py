"""
Project: QSummary
File Created: 2026-10-17
File Name: summarizer.py
Description:
    Main summarization entry point.
    Validates an AnalysisResult, drops hypotheses with a missing p-value,
    and counts how many p-values, q-values and local FDR estimates fall
    strictly below each significance threshold.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

import numpy as np

from qsummary.core.errors import InvalidInputError
from qsummary.core.models import (
    DEFAULT_DIGITS,
    DEFAULT_THRESHOLDS,
    ROW_LABELS,
    AnalysisResult,
    SummaryOptions,
    SummaryReport,
    ThresholdTable,
    is_missing,
)

logger = logging.getLogger(__name__)

# Widest precision accepted for pi0; beyond this only binary noise is printed
MAX_DIGITS = 22


def summarize(
    result: AnalysisResult,
    thresholds: Iterable[float] = DEFAULT_THRESHOLDS,
    digits: int = DEFAULT_DIGITS,
) -> SummaryReport:
    """Summarize a q-value analysis.

    Args:
        result: Output of an upstream q-value estimation.
        thresholds: Significance cuts, one table column each, in the given
            order. Need not be sorted or unique.
        digits: Significant digits used to display pi0.

    Returns:
        SummaryReport with the call, formatted pi0 and the count table.

    Raises:
        InvalidInputError: If the score arrays differ in length, pi0 is
            missing, a threshold is not a finite number or digits is not an
            integer between 1 and MAX_DIGITS.
    """
    cuts = _validate_thresholds(thresholds)
    _validate_digits(digits)
    pi0 = _validate_result(result)

    table = count_significant(result.pvalues, result.qvalues, result.lfdr, cuts)
    if table.n_excluded:
        logger.debug(
            "Excluded %d of %d hypotheses with missing p-values",
            table.n_excluded, table.n_total,
        )

    return SummaryReport(
        call=result.call,
        pi0=pi0,
        pi0_text=format_significant(pi0, digits),
        digits=digits,
        table=table,
    )


def summarize_with_options(result: AnalysisResult, options: SummaryOptions) -> SummaryReport:
    """Summarize using a SummaryOptions bundle."""
    return summarize(result, thresholds=options.thresholds, digits=options.digits)


def count_significant(
    pvalues: Sequence[float | None],
    qvalues: Sequence[float | None],
    lfdr: Sequence[float | None],
    thresholds: Sequence[float],
) -> ThresholdTable:
    """Build the cumulative-count table from three index-aligned arrays.

    A position is dropped from all three arrays when its p-value is
    missing. A value equal to a threshold is not counted (strict ``<``).

    Raises:
        InvalidInputError: If the arrays differ in length.
    """
    if not len(pvalues) == len(qvalues) == len(lfdr):
        raise InvalidInputError(
            f"pvalues, qvalues and lfdr must have equal length "
            f"(got {len(pvalues)}, {len(qvalues)}, {len(lfdr)})"
        )

    p = _to_array(pvalues, "pvalues")
    q = _to_array(qvalues, "qvalues")
    lf = _to_array(lfdr, "lfdr")

    valid = ~np.isnan(p)
    cuts = np.asarray(thresholds, dtype=np.float64)

    rows: dict[str, tuple[int, ...]] = {}
    for label, values in zip(ROW_LABELS, (p[valid], q[valid], lf[valid])):
        # NaN never compares below a cut, so missing q / lfdr entries drop out
        below = values[:, np.newaxis] < cuts[np.newaxis, :]
        rows[label] = tuple(int(n) for n in below.sum(axis=0))

    return ThresholdTable(
        thresholds=tuple(float(t) for t in cuts),
        counts=tuple(rows.items()),
        n_valid=int(valid.sum()),
        n_total=len(p),
    )


def format_significant(value: float, digits: int) -> str:
    """Format a number to ``digits`` significant digits, dropping trailing zeros."""
    return format(value, f".{digits}g")


# ── Validation ───────────────────────────────────────────────────────────────


def _validate_result(result: AnalysisResult) -> float:
    """Check the result object and return pi0 as a float."""
    if is_missing(result.pi0):
        raise InvalidInputError("pi0 is missing from the analysis result")
    try:
        return float(result.pi0)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"pi0 is not a number: {result.pi0!r}") from exc


def _validate_thresholds(thresholds: Iterable[float]) -> list[float]:
    cuts: list[float] = []
    for t in thresholds:
        if isinstance(t, (bool, str, bytes)):
            raise InvalidInputError(f"Threshold must be a number, got {t!r}")
        try:
            value = float(t)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Threshold must be a number, got {t!r}") from exc
        if not math.isfinite(value):
            raise InvalidInputError(f"Threshold must be finite, got {t!r}")
        cuts.append(value)
    return cuts


def _validate_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, (int, np.integer)):
        raise InvalidInputError(f"digits must be an integer, got {digits!r}")
    if not 1 <= digits <= MAX_DIGITS:
        raise InvalidInputError(f"digits must be between 1 and {MAX_DIGITS}, got {digits}")


def _to_array(values: Sequence[float | None], name: str) -> np.ndarray:
    """Convert a sequence with None / NaN / NA entries to a float array (missing = NaN)."""
    try:
        return np.array(
            [np.nan if is_missing(v) else float(v) for v in values],
            dtype=np.float64,
        )
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} contains a non-numeric entry") from exc
