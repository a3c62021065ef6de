from __future__ import annotations

import logging
import platform
import sys
from dataclasses import dataclass
from typing import Callable

from .cleaner import join_path
from .utils_time import now_ns, ns_per_op, ops_per_sec

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchResult:
    name: str
    round: int
    iterations: int
    elapsed_ns: int
    base: str
    extra: str
    output: str

    @property
    def ns_op(self) -> float:
        return ns_per_op(self.elapsed_ns, self.iterations)

    @property
    def ops_s(self) -> float:
        return ops_per_sec(self.ns_op)

    @property
    def label(self) -> str:
        # rounds repeat the same sub-benchmark, like `go test -count`
        return f"Benchmark{self.name}/#00"


@dataclass(frozen=True)
class HostInfo:
    goos: str
    goarch: str
    pkg: str


def host_info(pkg: str = "cleanpath") -> HostInfo:
    return HostInfo(goos=sys.platform, goarch=platform.machine().lower(), pkg=pkg)


def run_benchmark(
    base: str,
    extra: str,
    *,
    iterations: int,
    rounds: int = 1,
    name: str = "JoinPath",
    join_fn: Callable[[str, str], str] = join_path,
    clock: Callable[[], int] = now_ns,
) -> list[BenchResult]:
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations!r}")
    if rounds < 1:
        raise ValueError(f"rounds must be >= 1, got {rounds!r}")

    output = join_fn(base, extra)
    log.debug("Benchmark %s: join_path(%r, %r) -> %r", name, base, extra, output)

    results: list[BenchResult] = []
    for i in range(rounds):
        start = clock()
        for _ in range(iterations):
            join_fn(base, extra)
        end = clock()

        res = BenchResult(
            name=name,
            round=i,
            iterations=iterations,
            elapsed_ns=end - start,
            base=base,
            extra=extra,
            output=output,
        )
        results.append(res)
        log.info("Round %s/%s: %s iterations in %.3fs (%.2f ns/op)", i + 1, rounds, iterations, res.elapsed_ns / 1e9, res.ns_op)

    return results
