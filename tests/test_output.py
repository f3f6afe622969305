from __future__ import annotations

from benchmark_weights import map_results, record_to_dict, results_to_dicts
from conftest import make_batch


def test_record_to_dict_stringifies_wide_values(oracle):
    mapped = map_results([make_batch("first", "first", "a", 10, 3)], [], {}, oracle)
    data = record_to_dict(mapped[("first_pallet", "instance")][0])

    assert data["name"] == "first_benchmark"
    assert data["base_weight"] == "10000"
    assert data["base_reads"] == "10"
    assert data["component_weight"] == [{"name": "a", "slope": "3000", "error": "0"}]
    assert data["components"] == [
        {"name": "a", "is_used": True},
        {"name": "z", "is_used": False},
    ]
    assert data["worst_case_proof_size"] == 0
    assert data["comments"] == []


def test_results_to_dicts_keeps_group_order(oracle):
    mapped = map_results(
        [make_batch("second", "first", "a", 1, 1), make_batch("first", "first", "b", 1, 1)],
        [],
        {},
        oracle,
    )
    data = results_to_dicts(mapped)
    assert [(d["pallet"], d["instance"]) for d in data] == [
        ("second_pallet", "instance"),
        ("first_pallet", "instance"),
    ]
    assert data[0]["benchmarks"][0]["name"] == "first_benchmark"
