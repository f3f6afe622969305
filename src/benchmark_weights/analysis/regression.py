"""Interface to the regression strategies that fit benchmark samples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from itertools import repeat
from typing import Iterator, Mapping, Protocol, Sequence, Tuple

from benchmark_weights.benchmarks.schema import U128_MAX, BenchmarkResult
from benchmark_weights.errors import MissingRegressionError


class BenchmarkSelector(Enum):
    EXTRINSIC_TIME = "extrinsic_time"
    READS = "reads"
    WRITES = "writes"
    PROOF_SIZE = "proof_size"


class AnalysisChoice(Enum):
    MIN_SQUARES = "min-squares"
    MEDIAN_SLOPES = "median-slopes"
    MAX = "max"

    @classmethod
    def parse(cls, value: str | AnalysisChoice | None) -> AnalysisChoice:
        """Parse a user supplied strategy name; ``None`` picks min-squares."""
        if value is None:
            return cls.MIN_SQUARES
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for choice in cls:
            if choice.value == normalized:
                return choice
        options = ", ".join(choice.value for choice in cls)
        raise ValueError(f"Unknown analysis choice '{value}'. Expected one of: {options}.")


def to_u128(value: float | int) -> int:
    """Truncate towards zero and clamp into the unsigned 128 bit range."""
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return U128_MAX if value > 0 else 0
    return min(max(int(value), 0), U128_MAX)


@dataclass(frozen=True)
class RegressionResult:
    """Intercept and per-parameter slopes for one selector."""

    base: int
    slopes: Tuple[int, ...]
    names: Tuple[str, ...]
    errors: Tuple[float, ...] | None = None

    def __post_init__(self) -> None:
        if len(self.slopes) != len(self.names):
            raise ValueError(
                f"Got {len(self.slopes)} slopes for {len(self.names)} parameters."
            )
        object.__setattr__(self, "slopes", tuple(self.slopes))
        object.__setattr__(self, "names", tuple(self.names))
        if self.errors is not None:
            object.__setattr__(self, "errors", tuple(self.errors))

    def iter_errors(self) -> Iterator[int]:
        if self.errors is None:
            return repeat(0)
        return (to_u128(err) for err in self.errors)


class RegressionOracle(Protocol):
    def __call__(
        self,
        results: Sequence[BenchmarkResult],
        selector: BenchmarkSelector,
    ) -> RegressionResult | None:
        ...


def select_oracle(
    choice: AnalysisChoice | str | None,
    strategies: Mapping[AnalysisChoice, RegressionOracle],
) -> RegressionOracle:
    resolved = AnalysisChoice.parse(choice)
    if resolved not in strategies:
        raise ValueError(f"No regression strategy registered for '{resolved.value}'.")
    return strategies[resolved]


def run_analysis(
    oracle: RegressionOracle,
    results: Sequence[BenchmarkResult],
    selector: BenchmarkSelector,
) -> RegressionResult:
    analysis = oracle(results, selector)
    if analysis is None:
        raise MissingRegressionError(
            f"Regression strategy returned no result for {selector.value} "
            f"over {len(results)} samples."
        )
    return analysis
