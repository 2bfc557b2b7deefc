"""Line-oriented console formatting for corpus totals and executor reports."""

from parse_bench.models import CorpusStats, Report


def format_preamble(stats: CorpusStats, iterations: int) -> str:
    """Format the corpus totals printed before any executor report.

    Args:
        stats: Corpus totals.
        iterations: Number of passes over the corpus.

    Returns:
        Four newline-terminated lines.
    """
    lines = [
        f"file count:  {stats.file_count:8d}",
        f"total bytes: {stats.total_bytes:8d}",
        f"total lines: {stats.total_lines:8d}",
        f"iterations:  {iterations:8d}",
    ]
    return "\n".join(lines) + "\n"


def format_report(report: Report) -> str:
    """Format one executor's report.

    Throughput lines are omitted when the report has no CPU time.

    Args:
        report: Finalized executor report.

    Returns:
        Newline-terminated report block starting with a ``----`` separator.
    """
    lines = [
        "----",
        f"parser: {report.executor_name}",
        f"wall clock time (ms): {report.wall_ms:8d}",
        f"cpu time (ms):        {report.cpu_ms:8d}",
    ]
    if report.has_throughput:
        lines.append(f"throughput (byte/s):  {report.bytes_per_second:8d}")
        lines.append(f"throughput (line/s):  {report.lines_per_second:8d}")
    return "\n".join(lines) + "\n"
