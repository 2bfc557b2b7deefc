"""Throughput benchmarks for source-text parsers."""

__version__ = "0.1.0"
