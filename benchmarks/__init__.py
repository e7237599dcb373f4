"""Performance benchmarks for numlabs.

Microbenchmarks for the tensor-backed escape-time grids.
"""
