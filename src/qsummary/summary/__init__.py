"""
Project: QSummary
File Created: 2026-10-17
File Name: __init__.py
Description:
    Summarization and rendering of q-value analysis results.
"""

from qsummary.summary.render import print_summary, render_report, render_summary, render_table
from qsummary.summary.summarizer import count_significant, format_significant, summarize

__all__ = [
    "count_significant",
    "format_significant",
    "print_summary",
    "render_report",
    "render_summary",
    "render_table",
    "summarize",
]
