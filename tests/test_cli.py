from __future__ import annotations

from pathlib import Path

import pytest

from folio import cli


def write_config(site: Path, **extra: str) -> Path:
    lines = ["site_title: Test Site"] + [f"{k}: {v}" for k, v in extra.items()]
    path = site / "config.yml"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_one_shot_build(site: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    config = write_config(site)
    monkeypatch.setattr(cli, "watch", lambda cfg, log: pytest.fail("should not watch"))

    cli.main([str(config)])

    assert (site / "dist" / "index.html").exists()
    assert "Build complete!" in capsys.readouterr().out


def test_watch_flag_builds_then_watches(site: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config = write_config(site)
    seen = {}

    def fake_watch(cfg, log):
        seen["built"] = (cfg["output_dir"] / "index.html").exists()

    monkeypatch.setattr(cli, "watch", fake_watch)

    cli.main([str(config), "--watch"])

    assert seen == {"built": True}


def test_structural_failure_exits_non_zero(site: Path) -> None:
    config = write_config(site, content_root="does-not-exist")

    with pytest.raises(SystemExit) as exc:
        cli.main([str(config)])

    assert exc.value.code == 1


def test_missing_config_exits_non_zero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([str(tmp_path / "nope.yml")])

    assert exc.value.code == 1


def test_unknown_flag_is_rejected(site: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main([str(write_config(site)), "--serve"])

    assert exc.value.code == 2
