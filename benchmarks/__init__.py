"""
Benchmark suite for jtree parsing and validation performance.

Parsing is compared against:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Validation and serialization are measured on jtree alone.
"""
