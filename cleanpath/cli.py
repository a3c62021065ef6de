from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .bench import host_info, run_benchmark
from .cleaner import clean, join_path
from .config import REPORT_FORMATS, Config, default_config, load_config, write_example_config
from .renderer import render_bench, write_report

log = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        # stdout carries the command's result
        stream=sys.stderr,
    )


def cmd_init(args: argparse.Namespace) -> int:
    p = write_example_config(args.config, force=args.force)
    print(str(p))
    return 0


def cmd_join(args: argparse.Namespace) -> int:
    print(join_path(args.dir, args.file))
    return 0


def cmd_clean(args: argparse.Namespace) -> int:
    print(clean(args.path))
    return 0


def _bench_config(args: argparse.Namespace) -> Config:
    return load_config(args.config) if args.config else default_config()


def cmd_test(args: argparse.Namespace) -> int:
    cfg = _bench_config(args)

    rounds = args.rounds if args.rounds is not None else cfg.rounds
    iterations = args.iterations if args.iterations is not None else cfg.iterations
    base = args.dir if args.dir is not None else cfg.dir
    extra = args.file if args.file is not None else cfg.file
    fmt = args.format or cfg.report_format

    log.debug("Benchmark: rounds=%s iterations=%s dir=%r file=%r format=%s", rounds, iterations, base, extra, fmt)

    results = run_benchmark(
        base,
        extra,
        iterations=iterations,
        rounds=rounds,
        name=cfg.bench_name,
    )
    text = render_bench(results, host=host_info(), fmt=fmt)

    out_path = Path(args.out).expanduser().resolve() if args.out else cfg.out_path
    if out_path:
        write_report(text, out_path)
        print(str(out_path))
    else:
        sys.stdout.write(text)
        sys.stdout.flush()
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cleanpath", add_help=True)
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"cleanpath {__version__}")

    sub = p.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Generate example config.yaml")
    p_init.add_argument("--config", required=True)
    p_init.add_argument("--force", action="store_true")
    p_init.set_defaults(func=cmd_init)

    p_join = sub.add_parser("join", help="Join [dir] and [file] and print the cleaned path")
    p_join.add_argument("dir", nargs="?", default=".")
    p_join.add_argument("file", nargs="?", default=".")
    p_join.set_defaults(func=cmd_join)

    p_clean = sub.add_parser("clean", help="Print the cleaned form of PATH")
    p_clean.add_argument("path")
    p_clean.set_defaults(func=cmd_clean)

    p_test = sub.add_parser("test", help="Benchmark join_path (go test -bench output)")
    p_test.add_argument("rounds", nargs="?", type=int, default=None, help="Number of rounds (default from config, else 1)")
    p_test.add_argument("dir", nargs="?", default=None)
    p_test.add_argument("file", nargs="?", default=None)
    p_test.add_argument("--config", default="", help="Optional YAML config with benchmark defaults")
    p_test.add_argument("--iterations", type=int, default=None, help="Calls per round")
    p_test.add_argument("--format", choices=REPORT_FORMATS, default=None)
    p_test.add_argument("--out", default="", help="Write the report to this file instead of stdout")
    p_test.set_defaults(func=cmd_test)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(bool(args.debug))

    try:
        return int(args.func(args))
    except FileNotFoundError as e:
        log.error("Config error: %s", e)
        return 2
    except ValueError as e:
        log.error("Invalid argument: %s", e)
        return 2
    except Exception as e:  # noqa: BLE001
        log.exception("Unhandled error: %s", e)
        return 1
