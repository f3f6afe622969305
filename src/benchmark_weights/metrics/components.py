"""Selection of the benchmark parameters that affect a cost formula."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from benchmark_weights.analysis.regression import RegressionResult, to_u128
from benchmark_weights.benchmarks.schema import Component, ComponentSlope

# Regression output for extrinsic time is in nanoseconds, weights are in picoseconds.
WEIGHT_PER_UNIT = 1000


@dataclass
class ComponentUsage:
    used_names: List[str] = field(default_factory=list)
    weight: List[ComponentSlope] = field(default_factory=list)
    reads: List[ComponentSlope] = field(default_factory=list)
    writes: List[ComponentSlope] = field(default_factory=list)
    proof_size: List[ComponentSlope] = field(default_factory=list)


def scale_weight(value: int) -> int:
    return to_u128(value * WEIGHT_PER_UNIT)


def _collect_slopes(
    analysis: RegressionResult,
    used_names: List[str],
    scale: int = 1,
) -> List[ComponentSlope]:
    slopes: List[ComponentSlope] = []
    for slope, name, error in zip(analysis.slopes, analysis.names, analysis.iter_errors()):
        if slope == 0:
            continue
        if name not in used_names:
            used_names.append(name)
        slopes.append(
            ComponentSlope(
                name=name,
                slope=to_u128(slope * scale),
                error=to_u128(error * scale),
            )
        )
    return slopes


def resolve_component_usage(
    extrinsic_time: RegressionResult,
    reads: RegressionResult,
    writes: RegressionResult,
    proof_size: RegressionResult,
) -> ComponentUsage:
    """Keep only the slopes that are non-zero, in time/reads/writes/proof order.

    A parameter becomes used the first time any dimension gives it a non-zero
    slope, so ``used_names`` follows first appearance rather than name order.
    Only the time dimension is scaled by ``WEIGHT_PER_UNIT``.
    """
    usage = ComponentUsage()
    usage.weight = _collect_slopes(extrinsic_time, usage.used_names, scale=WEIGHT_PER_UNIT)
    usage.reads = _collect_slopes(reads, usage.used_names)
    usage.writes = _collect_slopes(writes, usage.used_names)
    usage.proof_size = _collect_slopes(proof_size, usage.used_names)
    return usage


def mark_components(parameter_names: Iterable[str], used_names: Sequence[str]) -> list[Component]:
    used = set(used_names)
    return [Component(name=name, is_used=name in used) for name in parameter_names]
