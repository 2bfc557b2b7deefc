#!/usr/bin/env python
"""
Parser Benchmark Suite

Measures parser throughput over a corpus of Python source files.

Usage:
    python benchmark.py -e python-ast src/
    python benchmark.py -e python-ast -e tree-sitter -n 10 src/
    python benchmark.py -e python-ast --skip-bodies src/
"""

import sys

sys.path.insert(0, 'src')

from parse_bench.cli import main


if __name__ == "__main__":
    sys.exit(main())
