"""
Loaders that turn tabular q-value output into an AnalysisResult.
"""

from qsummary.data.loader import load_result, result_from_frame

__all__ = ["load_result", "result_from_frame"]
