"""
Parse benchmark command line.

Measures parser throughput over a corpus of Python source files.

Usage:
    parse-bench -e python-ast src/
    parse-bench -e python-ast -e tree-sitter -n 10 lib/ app.py
    parse-bench -e tree-sitter --skip-bodies --log-level INFO src/
"""

import argparse

import structlog

from parse_bench.benchmark import BenchmarkController
from parse_bench.config import LOG_LEVELS, BenchmarkConfig, get_settings
from parse_bench.corpus import load_sources
from parse_bench.executors import list_executors
from parse_bench.logging import configure_logging
from parse_bench.models import ExecuteOptions

logger = structlog.get_logger()


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    arg_parser = argparse.ArgumentParser(
        prog="parse-bench",
        description="Measure the parser performance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    arg_parser.add_argument(
        "--executor", "-e",
        dest="executors",
        action="append",
        default=[],
        choices=list_executors(),
        help="Parser to benchmark; repeat to run several in order",
    )
    arg_parser.add_argument(
        "--iterations", "-n",
        type=_positive_int,
        default=1,
        help="Number of passes over the corpus (default: 1)",
    )
    arg_parser.add_argument(
        "--skip-bodies",
        action="store_true",
        help="Skip function bodies and type members if possible",
    )
    arg_parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level on stderr (default: PARSE_BENCH_LOG_LEVEL or WARNING)",
    )
    arg_parser.add_argument(
        "paths",
        nargs="*",
        help="Input files or directories searched recursively",
    )
    return arg_parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Process exit status.
    """
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, json_output=settings.log_json)

    config = BenchmarkConfig(
        executors=tuple(args.executors),
        iterations=args.iterations,
        options=ExecuteOptions(skip_bodies=args.skip_bodies),
    )
    if not config.executors:
        logger.warning("no_executor_selected", available=list_executors())

    corpus = load_sources(args.paths, suffixes=settings.source_suffixes)
    return BenchmarkController(config).run(corpus)
