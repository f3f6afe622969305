"""Regression strategy interface."""

from benchmark_weights.analysis.regression import (
    AnalysisChoice,
    BenchmarkSelector,
    RegressionOracle,
    RegressionResult,
    run_analysis,
    select_oracle,
    to_u128,
)

__all__ = [
    "AnalysisChoice",
    "BenchmarkSelector",
    "RegressionOracle",
    "RegressionResult",
    "run_analysis",
    "select_oracle",
    "to_u128",
]
