"""Timing probe for a single synchronous call."""

import time
from typing import Callable

from parse_bench.models import Measurement


def measure(op: Callable[[], object]) -> Measurement:
    """Measure the duration of one ``op()`` call.

    Wall-clock time comes from the monotonic ``perf_counter`` clock and CPU
    time from the process CPU clock, both sampled immediately around the
    call. On platforms with a coarse CPU clock the CPU duration of a very
    fast call may be 0.

    Args:
        op: Zero-argument callable, invoked exactly once.

    Returns:
        Measurement of (wall_ns, cpu_ns).
    """
    c_start = time.process_time_ns()
    t_start = time.perf_counter_ns()
    op()
    c_end = time.process_time_ns()
    t_end = time.perf_counter_ns()
    return Measurement(wall_ns=t_end - t_start, cpu_ns=c_end - c_start)
