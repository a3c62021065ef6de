from pathlib import Path

import pytest
import yaml

from cleanpath.config import default_config, load_config, write_example_config


def test_default_config():
    cfg = default_config()
    assert cfg.path is None
    assert cfg.bench_name == "JoinPath"
    assert cfg.iterations == 200_000
    assert cfg.rounds == 1
    assert (cfg.dir, cfg.file) == (".", ".")
    assert cfg.report_format == "text"
    assert cfg.out_path is None


def test_load_config_resolves_out_path_against_config_dir(tmp_path: Path):
    p = tmp_path / "conf" / "bench.yaml"
    p.parent.mkdir()
    p.write_text(
        yaml.safe_dump(
            {
                "bench": {"iterations": "50", "rounds": 3},
                "inputs": {"dir": "/a/b", "file": "../c/"},
                "report": {"format": "HTML", "out_path": "reports/bench.html"},
            }
        ),
        encoding="utf-8",
    )

    cfg = load_config(p)
    assert cfg.path == p.resolve()
    assert cfg.iterations == 50
    assert cfg.rounds == 3
    assert cfg.dir == "/a/b"
    assert cfg.file == "../c/"
    assert cfg.report_format == "html"
    assert cfg.out_path == (p.parent / "reports" / "bench.html").resolve()


def test_empty_config_file_uses_defaults(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(p).iterations == 200_000


def test_missing_config(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "body",
    [
        "- a\n- b\n",
        "bench: 3\n",
        "bench:\n  iterations: 0\n",
        "bench:\n  rounds: many\n",
        "report:\n  format: csv\n",
    ],
)
def test_invalid_config(tmp_path: Path, body: str):
    p = tmp_path / "bad.yaml"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_write_example_config_roundtrip_and_idempotent(tmp_path: Path):
    p = write_example_config(tmp_path / "config.yaml")
    cfg = load_config(p)
    assert cfg.dir == "/usr/local/../lib"
    assert cfg.report_format == "text"

    p.write_text("bench:\n  rounds: 7\n", encoding="utf-8")
    write_example_config(p)
    assert load_config(p).rounds == 7

    write_example_config(p, force=True)
    assert load_config(p).rounds == 1
