#!/usr/bin/env python
"""
Serialization Format Benchmark

Measures the minimum-of-3 read and write times for CSV, JSON, TOML, XML
and YAML files holding the same person records, and writes a summary CSV.

Usage:
    python benchmark.py
    python benchmark.py --verbose
"""

import sys

sys.path.insert(0, 'src')

from format_benchmark.cli import main


if __name__ == "__main__":
    sys.exit(main())
