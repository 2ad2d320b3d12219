"""
QSummary — command-line entry point.

Prints the q-value summary of a table of per-hypothesis scores.

Usage:
    qsummary results.csv --pi0 0.67
    qsummary results.parquet --pi0 0.67 --cuts 0.01 0.05 --digits 3
    qsummary results.csv --pi0 0.67 --call "qvalue(p, lambda=0.5)" -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from qsummary.core.errors import InvalidInputError
from qsummary.core.models import DEFAULT_DIGITS, DEFAULT_THRESHOLDS
from qsummary.data.loader import load_result
from qsummary.summary.render import print_summary

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qsummary",
        description="Summarize p-values, q-values and local FDR estimates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "table",
        help="CSV or Parquet file with pvalues, qvalues and lfdr columns",
    )
    parser.add_argument(
        "--pi0", type=float, required=True,
        help="Estimated proportion of true null hypotheses",
    )
    parser.add_argument(
        "--call", type=str, default=None,
        help="Description of the analysis shown on the Call line (default: file name)",
    )
    parser.add_argument(
        "--cuts", type=float, nargs="*", default=list(DEFAULT_THRESHOLDS),
        help="Significance thresholds, one table column each",
    )
    parser.add_argument(
        "--digits", type=int, default=DEFAULT_DIGITS,
        help=f"Significant digits for pi0 (default: {DEFAULT_DIGITS})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = load_result(args.table, pi0=args.pi0, call=args.call)
        print_summary(result, thresholds=args.cuts, digits=args.digits)
    except InvalidInputError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as exc:
        logger.debug("Failed to read %s", args.table, exc_info=True)
        print(f"ERROR: cannot read {args.table}: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
