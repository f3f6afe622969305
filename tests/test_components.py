from __future__ import annotations

from benchmark_weights import Component, ComponentSlope, RegressionResult, resolve_component_usage
from benchmark_weights.analysis.regression import to_u128
from benchmark_weights.benchmarks.schema import U128_MAX
from benchmark_weights.metrics.components import mark_components


def _result(slopes, names=("x", "y", "z"), base=0, errors=None):
    return RegressionResult(base=base, slopes=tuple(slopes), names=tuple(names), errors=errors)


def test_components_follow_first_appearance_order():
    usage = resolve_component_usage(
        _result([0, 0, 5]),
        _result([0, 2, 0]),
        _result([0, 0, 0]),
        _result([7, 0, 1]),
    )
    assert usage.used_names == ["z", "y", "x"]
    assert usage.weight == [ComponentSlope("z", 5000, 0)]
    assert usage.reads == [ComponentSlope("y", 2, 0)]
    assert usage.writes == []
    assert usage.proof_size == [ComponentSlope("x", 7, 0), ComponentSlope("z", 1, 0)]


def test_only_time_errors_are_scaled():
    # Errors are truncated to integers before scaling.
    usage = resolve_component_usage(
        _result([1, 0, 0], errors=(2.7, 0.0, 0.0)),
        _result([1, 0, 0], errors=(2.7, 0.0, 0.0)),
        _result([0, 0, 0]),
        _result([0, 0, 0]),
    )
    assert usage.weight == [ComponentSlope("x", 1000, 2000)]
    assert usage.reads == [ComponentSlope("x", 1, 2)]


def test_unused_parameters_are_marked():
    components = mark_components(["a", "b", "z"], ["b"])
    assert components == [
        Component("a", False),
        Component("b", True),
        Component("z", False),
    ]


def test_time_scaling_saturates():
    usage = resolve_component_usage(
        _result([U128_MAX, 0, 0]),
        _result([0, 0, 0]),
        _result([0, 0, 0]),
        _result([0, 0, 0]),
    )
    assert usage.weight[0].slope == U128_MAX


def test_error_conversion():
    assert to_u128(float("nan")) == 0
    assert to_u128(-3.5) == 0
    assert to_u128(3.9) == 3
    assert to_u128(float("inf")) == U128_MAX
