from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .bench import BenchResult, HostInfo
from .utils_time import fmt_ns_per_op

log = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

TEMPLATE_BY_FORMAT = {
    "text": "bench.txt",
    "html": "report.html",
}


def _fmt_int(n: int | None) -> str:
    if n is None:
        return "-"
    return f"{n:,}".replace(",", " ")


def _env(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["ns_op"] = fmt_ns_per_op
    env.filters["thousands"] = _fmt_int
    return env


def render_bench(
    results: list[BenchResult],
    *,
    host: HostInfo,
    fmt: str = "text",
    templates_dir: Path = TEMPLATES_DIR,
) -> str:
    try:
        name = TEMPLATE_BY_FORMAT[fmt]
    except KeyError:
        raise ValueError(f"Unknown report format: {fmt!r}") from None

    tpl = _env(templates_dir).get_template(name)
    title = f"Benchmark{results[0].name}" if results else "Benchmark"
    return tpl.render(
        results=results,
        host=host,
        title=title,
        generated_at=dt.datetime.now().isoformat(timespec="seconds"),
    )


def write_report(text: str, out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(text, encoding="utf-8")
    log.info("Report written: %s", out_path)
    return out_path
