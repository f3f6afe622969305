"""Grouping of benchmark batches by pallet instance."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from benchmark_weights.analysis.regression import RegressionOracle
from benchmark_weights.benchmarks.records import ComponentRanges, get_benchmark_data
from benchmark_weights.benchmarks.schema import BenchmarkBatch, StorageInfo, WeightRecord
from benchmark_weights.errors import EmptyInputError

logger = logging.getLogger(__name__)

GroupKey = Tuple[str, str]


def map_results(
    batches: Iterable[BenchmarkBatch],
    storage_info: Sequence[StorageInfo],
    component_ranges: ComponentRanges | None,
    oracle: RegressionOracle,
) -> Dict[GroupKey, List[WeightRecord]]:
    """Build weight records and group them by ``(pallet, instance)``.

    So ``[(p1, b1), (p1, b2), (p2, b1), (p1, b3)]`` becomes
    ``{p1: [b1, b2, b3], p2: [b1]}``, keeping first-seen group order.
    """
    batch_list = list(batches)
    if not batch_list:
        raise EmptyInputError("empty batches")

    ranges: Mapping = component_ranges or {}
    all_benchmarks: Dict[GroupKey, List[WeightRecord]] = {}
    for batch in batch_list:
        if not batch.time_results:
            logger.debug("Skipping %s::%s, no samples", batch.pallet, batch.benchmark)
            continue
        record = get_benchmark_data(batch, storage_info, ranges, oracle)
        all_benchmarks.setdefault((batch.pallet, batch.instance), []).append(record)

    logger.info(
        "Built %d weight records for %d pallet instances",
        sum(len(records) for records in all_benchmarks.values()),
        len(all_benchmarks),
    )
    return all_benchmarks
