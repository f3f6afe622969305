"""Assembly of the weight record for a single benchmark."""

from __future__ import annotations

from typing import List, Mapping, Sequence, Tuple

from benchmark_weights.analysis.regression import (
    BenchmarkSelector,
    RegressionOracle,
    RegressionResult,
    run_analysis,
    to_u128,
)
from benchmark_weights.benchmarks.schema import (
    BenchmarkBatch,
    Component,
    ComponentRange,
    StorageInfo,
    WeightRecord,
)
from benchmark_weights.metrics.components import (
    ComponentUsage,
    mark_components,
    resolve_component_usage,
    scale_weight,
)
from benchmark_weights.metrics.storage import process_storage_results

ComponentRanges = Mapping[Tuple[str, str], Sequence[ComponentRange]]


def build_weight_record(
    name: str,
    components: Sequence[Component],
    extrinsic_time: RegressionResult,
    reads: RegressionResult,
    writes: RegressionResult,
    proof_size: RegressionResult,
    usage: ComponentUsage,
    worst_case_proof_size: int,
    comments: Sequence[str],
    component_ranges: Sequence[ComponentRange] = (),
) -> WeightRecord:
    return WeightRecord(
        name=name,
        components=tuple(components),
        base_weight=scale_weight(extrinsic_time.base),
        base_reads=to_u128(reads.base),
        base_writes=to_u128(writes.base),
        base_proof_size=to_u128(proof_size.base),
        component_weight=tuple(usage.weight),
        component_reads=tuple(usage.reads),
        component_writes=tuple(usage.writes),
        component_proof_size=tuple(usage.proof_size),
        worst_case_proof_size=worst_case_proof_size,
        component_ranges=tuple(component_ranges),
        comments=tuple(comments),
    )


def get_benchmark_data(
    batch: BenchmarkBatch,
    storage_info: Sequence[StorageInfo],
    component_ranges: ComponentRanges,
    oracle: RegressionOracle,
) -> WeightRecord:
    """Fit all four cost dimensions of ``batch`` and describe its storage use."""
    comments: List[str] = []

    extrinsic_time = run_analysis(oracle, batch.time_results, BenchmarkSelector.EXTRINSIC_TIME)
    reads = run_analysis(oracle, batch.db_results, BenchmarkSelector.READS)
    writes = run_analysis(oracle, batch.db_results, BenchmarkSelector.WRITES)
    proof_size = run_analysis(oracle, batch.db_results, BenchmarkSelector.PROOF_SIZE)

    usage = resolve_component_usage(extrinsic_time, reads, writes, proof_size)
    components = mark_components(batch.time_results[0].parameter_names, usage.used_names)

    worst_case_proof_size = process_storage_results(comments, batch.db_results, storage_info)

    return build_weight_record(
        name=batch.benchmark,
        components=components,
        extrinsic_time=extrinsic_time,
        reads=reads,
        writes=writes,
        proof_size=proof_size,
        usage=usage,
        worst_case_proof_size=worst_case_proof_size,
        comments=comments,
        component_ranges=component_ranges.get((batch.pallet, batch.benchmark), ()),
    )
