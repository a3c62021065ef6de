from __future__ import annotations

import time


def now_ns() -> int:
    """Monotonic clock in nanoseconds."""
    return time.perf_counter_ns()


def ns_per_op(elapsed_ns: int, ops: int) -> float:
    if ops <= 0:
        raise ValueError(f"ops must be >= 1, got {ops!r}")
    return elapsed_ns / ops


def fmt_ns_per_op(v: float) -> str:
    # same column layout as `go test -bench`
    return f"{v: 10.2f} ns/op"


def ops_per_sec(ns_op: float) -> float:
    if ns_op <= 0:
        return 0.0
    return 1e9 / ns_op
