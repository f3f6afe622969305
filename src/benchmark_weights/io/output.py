"""Conversion of weight records into plain data for renderers."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from benchmark_weights.benchmarks.schema import WeightRecord

# Values that may exceed 64 bits are handed over as decimal strings.
_WIDE_FIELDS = ("base_weight", "base_reads", "base_writes", "base_proof_size")
_SLOPE_FIELDS = ("component_weight", "component_reads", "component_writes", "component_proof_size")


def record_to_dict(record: WeightRecord) -> Dict[str, Any]:
    data = asdict(record)
    for key in ("components", "component_ranges", "comments"):
        data[key] = list(data[key])
    for key in _WIDE_FIELDS:
        data[key] = str(data[key])
    for key in _SLOPE_FIELDS:
        data[key] = [
            {"name": slope["name"], "slope": str(slope["slope"]), "error": str(slope["error"])}
            for slope in data[key]
        ]
    return data


def results_to_dicts(
    results: Mapping[Tuple[str, str], Sequence[WeightRecord]],
) -> List[Dict[str, Any]]:
    return [
        {
            "pallet": pallet,
            "instance": instance,
            "benchmarks": [record_to_dict(record) for record in records],
        }
        for (pallet, instance), records in results.items()
    ]
