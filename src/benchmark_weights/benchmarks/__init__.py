"""Benchmark samples, grouping and weight records."""
