from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

REPORT_FORMATS = ("text", "html")


@dataclass(frozen=True)
class Config:
    path: Path | None
    raw: dict[str, Any]
    base_dir: Path

    bench_name: str
    iterations: int
    rounds: int

    dir: str
    file: str

    report_format: str
    out_path: Path | None


def _as_int(v: Any, *, name: str, default: int) -> int:
    if v is None or v == "":
        return default
    try:
        n = int(v)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {v!r}") from None
    if n < 1:
        raise ValueError(f"{name} must be >= 1, got {n}")
    return n


def _as_str(v: Any, default: str) -> str:
    if v is None:
        return default
    return str(v)


def _resolve_path(base_dir: Path, p: str | Path) -> Path:
    pp = Path(p)
    if pp.is_absolute():
        return pp
    return (base_dir / pp).resolve()


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    sec = raw.get(key) or {}
    if not isinstance(sec, dict):
        raise ValueError(f"{key} must be a mapping")
    return sec


def from_mapping(raw: dict[str, Any], *, path: Path | None = None, base_dir: Path | None = None) -> Config:
    if not isinstance(raw, dict):
        raise ValueError("Config root must be a mapping")

    base_dir = base_dir or (path.parent if path else Path.cwd())

    bench = _section(raw, "bench")
    bench_name = str(bench.get("name", "JoinPath")).strip() or "JoinPath"
    iterations = _as_int(bench.get("iterations"), name="bench.iterations", default=200_000)
    rounds = _as_int(bench.get("rounds"), name="bench.rounds", default=1)

    inputs = _section(raw, "inputs")
    # paths are taken verbatim: whitespace and empty strings are meaningful here
    dir_ = _as_str(inputs.get("dir"), ".")
    file = _as_str(inputs.get("file"), ".")

    report = _section(raw, "report")
    report_format = str(report.get("format", "text")).strip().lower() or "text"
    if report_format not in REPORT_FORMATS:
        raise ValueError(f"report.format must be one of {', '.join(REPORT_FORMATS)}, got {report_format!r}")
    out_raw = str(report.get("out_path", "") or "").strip()
    out_path = _resolve_path(base_dir, out_raw) if out_raw else None

    return Config(
        path=path,
        raw=raw,
        base_dir=base_dir,
        bench_name=bench_name,
        iterations=iterations,
        rounds=rounds,
        dir=dir_,
        file=file,
        report_format=report_format,
        out_path=out_path,
    )


def default_config() -> Config:
    return from_mapping({})


def load_config(config_path: str | Path) -> Config:
    path = Path(config_path).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return from_mapping(raw, path=path)


def write_example_config(path: str | Path, force: bool = False) -> Path:
    p = Path(path).expanduser().resolve()
    if p.exists() and not force:
        # Idempotent: never clobber an edited config without --force.
        return p

    example = {
        "bench": {"name": "JoinPath", "iterations": 200_000, "rounds": 1},
        "inputs": {"dir": "/usr/local/../lib", "file": "./python3/site-packages/"},
        "report": {"format": "text", "out_path": ""},
    }

    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(yaml.safe_dump(example, sort_keys=False, allow_unicode=True), encoding="utf-8")
    return p
