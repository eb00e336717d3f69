"""
Benchmark suite for boundyaml parsing performance.

Compares boundyaml against PyYAML's safe loader on documents inside the
supported subset, and measures the memory ceiling the capacity bounds
impose on hostile input.
"""
