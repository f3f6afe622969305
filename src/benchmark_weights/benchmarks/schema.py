"""Schema definitions for benchmark samples and weight records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

U32_MAX = 2**32 - 1
U128_MAX = 2**128 - 1


def _as_text(value: str | bytes, label: str) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"{label} is not valid UTF-8: {value!r}") from exc
    return value


@dataclass(frozen=True)
class KeyAccess:
    """A storage key touched during one benchmark run."""

    key: bytes
    reads: int = 0
    writes: int = 0
    whitelisted: bool = False

    @classmethod
    def coerce(cls, value: KeyAccess | Sequence) -> KeyAccess:
        if isinstance(value, KeyAccess):
            return value
        key, reads, writes, whitelisted = value
        return cls(key=bytes(key), reads=reads, writes=writes, whitelisted=bool(whitelisted))


@dataclass(frozen=True)
class BenchmarkResult:
    """Measurements of a single benchmark run."""

    components: Tuple[Tuple[str, int], ...]
    extrinsic_time: int
    reads: int
    writes: int
    proof_size: int
    storage_root_time: int = 0
    repeat_reads: int = 0
    repeat_writes: int = 0
    keys: Tuple[KeyAccess, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple((str(n), v) for n, v in self.components))
        object.__setattr__(self, "keys", tuple(KeyAccess.coerce(k) for k in self.keys))

    @property
    def parameter_names(self) -> list[str]:
        return [name for name, _ in self.components]


@dataclass(frozen=True)
class BenchmarkBatch:
    """All samples collected for one benchmark of one pallet instance."""

    pallet: str
    benchmark: str
    time_results: Tuple[BenchmarkResult, ...] = ()
    db_results: Tuple[BenchmarkResult, ...] = ()
    instance: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "pallet", _as_text(self.pallet, "pallet"))
        object.__setattr__(self, "benchmark", _as_text(self.benchmark, "benchmark"))
        object.__setattr__(self, "instance", _as_text(self.instance or "", "instance"))
        object.__setattr__(self, "time_results", tuple(self.time_results))
        object.__setattr__(self, "db_results", tuple(self.db_results))


@dataclass(frozen=True)
class StorageInfo:
    """Declared metadata of a storage item, keyed by its prefix."""

    pallet_name: str
    storage_name: str
    prefix: bytes
    max_values: int | None = None
    max_size: int | None = None


SKIPPED_METADATA = StorageInfo(
    pallet_name="Skipped",
    storage_name="Metadata",
    prefix=b"Skipped Metadata",
)

BENCHMARK_OVERRIDE = StorageInfo(
    pallet_name="Benchmark",
    storage_name="Override",
    prefix=b"Benchmark Override",
)


@dataclass(frozen=True)
class ComponentRange:
    """Lowest and highest value a benchmark parameter was sampled with."""

    name: str
    min: int
    max: int


@dataclass(frozen=True)
class Component:
    name: str
    is_used: bool


@dataclass(frozen=True)
class ComponentSlope:
    name: str
    slope: int
    error: int


@dataclass(frozen=True)
class WeightRecord:
    """Linear cost model and storage notes for a single benchmark."""

    name: str
    components: Tuple[Component, ...]
    base_weight: int
    base_reads: int
    base_writes: int
    base_proof_size: int
    component_weight: Tuple[ComponentSlope, ...]
    component_reads: Tuple[ComponentSlope, ...]
    component_writes: Tuple[ComponentSlope, ...]
    component_proof_size: Tuple[ComponentSlope, ...]
    worst_case_proof_size: int
    component_ranges: Tuple[ComponentRange, ...] = ()
    comments: Tuple[str, ...] = ()
