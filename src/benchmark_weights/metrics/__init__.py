"""Cost formula and storage metrics."""
