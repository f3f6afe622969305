from __future__ import annotations

from typing import Sequence

import numpy as np
import pytest

from benchmark_weights import (
    BenchmarkBatch,
    BenchmarkResult,
    BenchmarkSelector,
    RegressionResult,
)

_SELECTOR_FIELDS = {
    BenchmarkSelector.EXTRINSIC_TIME: "extrinsic_time",
    BenchmarkSelector.READS: "reads",
    BenchmarkSelector.WRITES: "writes",
    BenchmarkSelector.PROOF_SIZE: "proof_size",
}


def least_squares(
    results: Sequence[BenchmarkResult],
    selector: BenchmarkSelector,
) -> RegressionResult | None:
    """Ordinary least squares fit used as a stand-in regression strategy."""
    if not results:
        return None
    names = results[0].parameter_names
    values = np.array([[value for _, value in r.components] for r in results], dtype=float)
    targets = np.array([getattr(r, _SELECTOR_FIELDS[selector]) for r in results], dtype=float)
    design = np.column_stack([np.ones(len(results)), values])
    coef, *_ = np.linalg.lstsq(design, targets, rcond=None)
    coef = np.round(coef).astype(int)
    return RegressionResult(
        base=int(max(coef[0], 0)),
        slopes=tuple(int(max(c, 0)) for c in coef[1:]),
        names=tuple(names),
    )


def make_batch(
    pallet: str,
    benchmark: str,
    param: str,
    base: int,
    slope: int,
    instance: str = "instance",
    keys=(),
) -> BenchmarkBatch:
    results = [
        BenchmarkResult(
            components=((param, i), ("z", 0)),
            extrinsic_time=base + slope * i,
            storage_root_time=base + slope * i,
            reads=base + slope * i,
            writes=base + slope * i,
            proof_size=(i + 1) * 1024,
            keys=keys,
        )
        for i in range(5)
    ]
    return BenchmarkBatch(
        pallet=f"{pallet}_pallet",
        instance=instance,
        benchmark=f"{benchmark}_benchmark",
        time_results=results,
        db_results=results,
    )


@pytest.fixture
def oracle():
    return least_squares
