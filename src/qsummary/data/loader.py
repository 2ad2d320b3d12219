"""
Project: QSummary
File Created: 2026-10-17
File Name: loader.py
Description:
    Build an AnalysisResult from tabular q-value output.

    Accepts a pandas DataFrame, or a CSV / Parquet file, with one row per
    hypothesis and columns for the p-value, q-value and local FDR. Common
    column spellings are recognised (``p``, ``p_value``, ``pvalue`` ...).
    Empty cells load as NaN and count as missing.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from qsummary.core.errors import InvalidInputError
from qsummary.core.models import AnalysisResult

logger = logging.getLogger(__name__)

PARQUET_SUFFIXES = {".parquet", ".pq"}

# Field → accepted column names (matched case-insensitively)
COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "pvalues": ("pvalues", "pvalue", "p_value", "p-value", "p"),
    "qvalues": ("qvalues", "qvalue", "q_value", "q-value", "q"),
    "lfdr": ("lfdr", "local_fdr", "local fdr", "local-fdr"),
}


def result_from_frame(
    frame: pd.DataFrame,
    pi0: float | None,
    call: str = "",
) -> AnalysisResult:
    """Wrap a DataFrame of per-hypothesis scores into an AnalysisResult.

    Raises:
        InvalidInputError: If a score column is absent or non-numeric.
    """
    columns = {str(c).strip().lower(): c for c in frame.columns}

    arrays: dict[str, list[float]] = {}
    for field_name, aliases in COLUMN_ALIASES.items():
        source = next((columns[a] for a in aliases if a in columns), None)
        if source is None:
            raise InvalidInputError(
                f"No {field_name} column found (expected one of: {', '.join(aliases)})"
            )
        try:
            values = pd.to_numeric(frame[source], errors="raise")
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"Column {source!r} is not numeric") from exc
        arrays[field_name] = values.astype("float64").tolist()

    return AnalysisResult(pi0=pi0, call=call, **arrays)


def load_result(
    path: str | Path,
    pi0: float | None,
    call: str | None = None,
) -> AnalysisResult:
    """Load a CSV or Parquet table of scores.

    Args:
        path: File with one row per hypothesis.
        pi0: Null proportion estimated upstream.
        call: Description shown in the summary; defaults to the file name.
    """
    path = Path(path)
    if path.suffix.lower() in PARQUET_SUFFIXES:
        frame = pd.read_parquet(path)
    else:
        frame = pd.read_csv(path)

    logger.info("Loaded %d hypotheses from %s", len(frame), path)
    return result_from_frame(frame, pi0=pi0, call=call if call is not None else path.name)
