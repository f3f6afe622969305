"""Configuration for the weight writer, loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from benchmark_weights.analysis.regression import AnalysisChoice
from benchmark_weights.benchmarks.schema import U32_MAX, ComponentRange, StorageInfo


@dataclass(frozen=True)
class WriterConfig:
    analysis_choice: AnalysisChoice = AnalysisChoice.MIN_SQUARES
    storage_info: Tuple[StorageInfo, ...] = ()
    component_ranges: Dict[Tuple[str, str], Tuple[ComponentRange, ...]] = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)


def _parse_prefix(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Storage prefix must be a hex string, got {value!r}")
    text = value[2:] if value.startswith("0x") else value
    try:
        return bytes.fromhex(text)
    except ValueError as exc:
        raise ValueError(f"Storage prefix '{value}' is not valid hex") from exc


def _optional_u32(entry: Mapping[str, Any], key: str) -> int | None:
    value = entry.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U32_MAX:
        raise ValueError(f"'{key}' must be an unsigned 32 bit integer, got {value!r}")
    return value


def _parse_storage(entries: Any) -> Tuple[StorageInfo, ...]:
    if not isinstance(entries, list):
        raise ValueError("'storage' must be a list of storage declarations.")
    infos: List[StorageInfo] = []
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Storage entry {idx} must be a mapping.")
        missing = [key for key in ("pallet", "storage", "prefix") if key not in entry]
        if missing:
            raise ValueError(f"Storage entry {idx} is missing: {', '.join(missing)}")
        infos.append(
            StorageInfo(
                pallet_name=str(entry["pallet"]),
                storage_name=str(entry["storage"]),
                prefix=_parse_prefix(entry["prefix"]),
                max_values=_optional_u32(entry, "max_values"),
                max_size=_optional_u32(entry, "max_size"),
            )
        )
    return tuple(infos)


def _parse_component_ranges(entries: Any) -> Dict[Tuple[str, str], Tuple[ComponentRange, ...]]:
    if not isinstance(entries, list):
        raise ValueError("'component_ranges' must be a list.")
    ranges: Dict[Tuple[str, str], Tuple[ComponentRange, ...]] = {}
    for idx, entry in enumerate(entries):
        if not isinstance(entry, dict) or "pallet" not in entry or "benchmark" not in entry:
            raise ValueError(f"Component range entry {idx} needs 'pallet' and 'benchmark'.")
        items = entry.get("ranges", [])
        if not isinstance(items, list):
            raise ValueError(f"Component range entry {idx} must define a 'ranges' list.")
        ranges[(str(entry["pallet"]), str(entry["benchmark"]))] = tuple(
            _parse_range_item(idx, item) for item in items
        )
    return ranges


def _parse_range_item(idx: int, item: Any) -> ComponentRange:
    if not isinstance(item, dict):
        raise ValueError(f"Component range entry {idx} has a range that is not a mapping: {item!r}")
    missing = [key for key in ("name", "min", "max") if key not in item]
    if missing:
        raise ValueError(f"Component range entry {idx} is missing: {', '.join(missing)}")
    bounds = {}
    for key in ("min", "max"):
        value = item[key]
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= U32_MAX:
            raise ValueError(
                f"Component range entry {idx} '{key}' must be an unsigned 32 bit integer, got {value!r}"
            )
        bounds[key] = value
    return ComponentRange(name=str(item["name"]), min=bounds["min"], max=bounds["max"])


def parse_writer_config(data: Mapping[str, Any] | None) -> WriterConfig:
    data = dict(data or {})
    known = {"analysis", "storage", "component_ranges"}
    return WriterConfig(
        analysis_choice=AnalysisChoice.parse(data.get("analysis")),
        storage_info=_parse_storage(data.get("storage", [])),
        component_ranges=_parse_component_ranges(data.get("component_ranges", [])),
        extra={key: value for key, value in data.items() if key not in known},
    )


def load_writer_config(path: str | Path) -> WriterConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is not None and not isinstance(data, dict):
        raise ValueError("Config must be a YAML mapping.")
    return parse_writer_config(data)
