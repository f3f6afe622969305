from __future__ import annotations

from itertools import islice

import pytest

from benchmark_weights import AnalysisChoice, BenchmarkSelector, RegressionResult, select_oracle
from benchmark_weights.analysis.regression import run_analysis


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, AnalysisChoice.MIN_SQUARES),
        ("min-squares", AnalysisChoice.MIN_SQUARES),
        ("min_squares", AnalysisChoice.MIN_SQUARES),
        ("Median-Slopes", AnalysisChoice.MEDIAN_SLOPES),
        ("max", AnalysisChoice.MAX),
        (AnalysisChoice.MAX, AnalysisChoice.MAX),
    ],
)
def test_parse_analysis_choice(value, expected):
    assert AnalysisChoice.parse(value) == expected


def test_parse_unknown_choice():
    with pytest.raises(ValueError, match="Unknown analysis choice"):
        AnalysisChoice.parse("mean")


def test_select_oracle(oracle):
    strategies = {AnalysisChoice.MIN_SQUARES: oracle}
    assert select_oracle(None, strategies) is oracle
    with pytest.raises(ValueError, match="No regression strategy"):
        select_oracle("max", strategies)


def test_missing_errors_default_to_zero():
    result = RegressionResult(base=1, slopes=(1, 2), names=("a", "b"))
    assert list(islice(result.iter_errors(), 3)) == [0, 0, 0]


def test_mismatched_slopes_and_names():
    with pytest.raises(ValueError):
        RegressionResult(base=0, slopes=(1,), names=("a", "b"))


def test_run_analysis_uses_oracle(oracle):
    from conftest import make_batch

    batch = make_batch("p", "b", "a", 10, 3)
    result = run_analysis(oracle, batch.time_results, BenchmarkSelector.EXTRINSIC_TIME)
    assert result.base == 10
    assert result.slopes == (3, 0)
    assert result.names == ("a", "z")
