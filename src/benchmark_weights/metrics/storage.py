"""Storage access accounting and worst case proof size estimation."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Set

from benchmark_weights.benchmarks.schema import (
    BENCHMARK_OVERRIDE,
    SKIPPED_METADATA,
    U32_MAX,
    BenchmarkResult,
    KeyAccess,
    StorageInfo,
)
from benchmark_weights.errors import AccountingInvariantError

logger = logging.getLogger(__name__)

PREFIX_LENGTH = 32
TRIE_FANOUT = 16
HASH_SIZE = 32
MAX_TRIE_DEPTH = 8
# Undeclared maps are assumed to span six trie layers.
DEFAULT_MAX_VALUES = TRIE_FANOUT**6


def storage_prefix(key: bytes) -> bytes:
    return bytes(key[:PREFIX_LENGTH])


def easy_log_16(value: int) -> int:
    """Smallest depth ``d`` in 1..8 with ``value <= 16 ** (d - 1)``."""
    for exponent in range(MAX_TRIE_DEPTH - 1):
        if value <= TRIE_FANOUT**exponent:
            return exponent + 1
    return MAX_TRIE_DEPTH


def worst_case_pov(
    max_values: int | None,
    max_size: int | None,
    is_new_prefix: bool,
) -> int | None:
    """Proof bytes needed for one new key, or ``None`` when its size is unbounded."""
    if max_size is None:
        return None
    trie_size = 0
    if is_new_prefix:
        depth = easy_log_16(DEFAULT_MAX_VALUES if max_values is None else max_values)
        # Every layer holds 16 sibling hashes of 32 bytes.
        trie_size = depth * TRIE_FANOUT * HASH_SIZE
    return trie_size + max_size


def build_storage_map(storage_info: Iterable[StorageInfo]) -> Dict[bytes, StorageInfo]:
    storage_map = {bytes(info.prefix): info for info in storage_info}
    storage_map[SKIPPED_METADATA.prefix] = SKIPPED_METADATA
    storage_map[BENCHMARK_OVERRIDE.prefix] = BENCHMARK_OVERRIDE
    return storage_map


class StorageAccountant:
    """Tracks keys and prefixes seen across all runs of one benchmark.

    Unknown keys are printed in full as ``0x`` followed by lowercase hex,
    without truncation, however long the key is.
    """

    def __init__(self, storage_info: Iterable[StorageInfo]) -> None:
        self.storage_map = build_storage_map(storage_info)
        self.seen_keys: Set[bytes] = set()
        self.seen_prefixes: Set[bytes] = set()
        self.comments: List[str] = []
        self.worst_case_proof_size = 0

    def add(self, access: KeyAccess) -> None:
        if access.whitelisted:
            return
        key = bytes(access.key)
        prefix = storage_prefix(key)
        key_seen = key in self.seen_keys
        prefix_seen = prefix in self.seen_prefixes

        if key_seen and prefix_seen:
            return
        if key_seen:
            raise AccountingInvariantError(
                f"Key 0x{key.hex()} was accounted for without its prefix 0x{prefix.hex()}."
            )
        self.seen_keys.add(key)
        self.seen_prefixes.add(prefix)

        info = self.storage_map.get(prefix)
        if not prefix_seen:
            self.comments.append(self._describe(info, access))
        self._charge(info, access, is_new_prefix=not prefix_seen)

    def add_results(self, results: Iterable[BenchmarkResult]) -> None:
        for result in results:
            for access in result.keys:
                self.add(access)

    def _describe(self, info: StorageInfo | None, access: KeyAccess) -> str:
        if info is None:
            logger.debug("No storage metadata for key 0x%s", access.key.hex())
            return f"Storage: unknown [0x{access.key.hex()}] (r:{access.reads} w:{access.writes})"
        return f"Storage: {info.pallet_name} {info.storage_name} (r:{access.reads} w:{access.writes})"

    def _charge(self, info: StorageInfo | None, access: KeyAccess, is_new_prefix: bool) -> None:
        if info is None:
            self.comments.append(
                f"Storage Proof Skipped: unknown [0x{access.key.hex()}] "
                f"(r:{access.reads} w:{access.writes})"
            )
            return
        pov = worst_case_pov(info.max_values, info.max_size, is_new_prefix)
        if pov is None:
            logger.debug("Skipping proof size of %s %s", info.pallet_name, info.storage_name)
            self.comments.append(f"Storage Proof Skipped: {info.pallet_name} {info.storage_name}")
            return
        self.worst_case_proof_size = min(self.worst_case_proof_size + pov, U32_MAX)


def process_storage_results(
    comments: List[str],
    results: Iterable[BenchmarkResult],
    storage_info: Iterable[StorageInfo],
) -> int:
    """Append storage comments for ``results`` and return their worst case proof size."""
    accountant = StorageAccountant(storage_info)
    accountant.add_results(results)
    comments.extend(accountant.comments)
    return accountant.worst_case_proof_size
