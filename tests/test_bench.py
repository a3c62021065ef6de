import pytest

from cleanpath.bench import HostInfo, run_benchmark
from cleanpath.renderer import render_bench


def _fake_clock(step_ns: int):
    t = {"now": 0}

    def clock() -> int:
        t["now"] += step_ns
        return t["now"]

    return clock


def test_run_benchmark_rounds_and_ns_op():
    calls = []

    def join_fn(a, b):
        calls.append((a, b))
        return "x"

    results = run_benchmark("a", "b", iterations=10, rounds=3, join_fn=join_fn, clock=_fake_clock(500))

    assert len(results) == 3
    # one warm-up call for the output, then 10 per round
    assert len(calls) == 1 + 3 * 10
    for i, r in enumerate(results):
        assert r.round == i
        assert r.iterations == 10
        assert r.elapsed_ns == 500
        assert r.ns_op == 50.0
        assert r.ops_s == pytest.approx(2e7)
        assert r.output == "x"
        assert r.label == "BenchmarkJoinPath/#00"


def test_run_benchmark_uses_join_path_by_default():
    (r,) = run_benchmark("a/b", "../c/", iterations=1)
    assert r.output == "a/c/"


@pytest.mark.parametrize("iterations, rounds", [(0, 1), (1, 0), (-5, 1)])
def test_run_benchmark_rejects_bad_counts(iterations, rounds):
    with pytest.raises(ValueError):
        run_benchmark("a", "b", iterations=iterations, rounds=rounds)


def test_render_text_matches_go_bench_format():
    results = run_benchmark("a", "b", iterations=4, rounds=2, clock=_fake_clock(1000))
    text = render_bench(results, host=HostInfo(goos="linux", goarch="x86_64", pkg="cleanpath"))

    assert text.splitlines() == [
        "goos: linux",
        "goarch: x86_64",
        "pkg: cleanpath",
        "BenchmarkJoinPath/#00        4\t    250.00 ns/op",
        "BenchmarkJoinPath/#00        4\t    250.00 ns/op",
        "PASS",
    ]
    assert text.endswith("PASS\n")


def test_render_html_escapes_inputs():
    results = run_benchmark("<a>", "b", iterations=2, clock=_fake_clock(10))
    html = render_bench(results, host=HostInfo(goos="linux", goarch="x86_64", pkg="cleanpath"), fmt="html")

    assert "<title>BenchmarkJoinPath</title>" in html
    assert "&lt;a&gt;" in html
    assert "<a>" not in html


def test_render_unknown_format():
    with pytest.raises(ValueError):
        render_bench([], host=HostInfo(goos="", goarch="", pkg=""), fmt="csv")
