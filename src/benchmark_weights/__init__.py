"""Linear weight models and proof size bounds from benchmark samples."""

from benchmark_weights.analysis.regression import (
    AnalysisChoice,
    BenchmarkSelector,
    RegressionOracle,
    RegressionResult,
    select_oracle,
)
from benchmark_weights.benchmarks.grouping import map_results
from benchmark_weights.benchmarks.records import build_weight_record, get_benchmark_data
from benchmark_weights.benchmarks.schema import (
    BENCHMARK_OVERRIDE,
    SKIPPED_METADATA,
    BenchmarkBatch,
    BenchmarkResult,
    Component,
    ComponentRange,
    ComponentSlope,
    KeyAccess,
    StorageInfo,
    WeightRecord,
)
from benchmark_weights.config import WriterConfig, load_writer_config, parse_writer_config
from benchmark_weights.errors import (
    AccountingInvariantError,
    EmptyInputError,
    MissingRegressionError,
    WeightWriterError,
)
from benchmark_weights.io.output import record_to_dict, results_to_dicts
from benchmark_weights.metrics.components import resolve_component_usage
from benchmark_weights.metrics.storage import (
    StorageAccountant,
    process_storage_results,
    worst_case_pov,
)

__all__ = [
    "AccountingInvariantError",
    "AnalysisChoice",
    "BENCHMARK_OVERRIDE",
    "BenchmarkBatch",
    "BenchmarkResult",
    "BenchmarkSelector",
    "Component",
    "ComponentRange",
    "ComponentSlope",
    "EmptyInputError",
    "KeyAccess",
    "MissingRegressionError",
    "RegressionOracle",
    "RegressionResult",
    "SKIPPED_METADATA",
    "StorageAccountant",
    "StorageInfo",
    "WeightRecord",
    "WeightWriterError",
    "WriterConfig",
    "build_weight_record",
    "get_benchmark_data",
    "load_writer_config",
    "map_results",
    "parse_writer_config",
    "process_storage_results",
    "record_to_dict",
    "resolve_component_usage",
    "results_to_dicts",
    "select_oracle",
    "worst_case_pov",
]
