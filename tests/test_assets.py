from __future__ import annotations

from pathlib import Path

from folio.assets import copy_project_assets, copy_root_assets, publish_sibling_assets


def test_siblings_are_copied_and_videos_skipped(cfg: dict, log, tmp_path: Path) -> None:
    doc = cfg["content_root"] / "about" / "index.md"
    dest = tmp_path / "out" / "about"

    copied = publish_sibling_assets(doc, dest, cfg, log)

    assert copied == 1
    assert (dest / "photo.jpg").read_bytes() == b"\xff\xd8jpeg"
    assert not (dest / "clip.mp4").exists()
    assert not (dest / "index.md").exists()
    skipped = log.of_kind("asset_skipped")
    assert [e.path.name for e in skipped] == ["clip.mp4"]


def test_video_denylist_is_case_insensitive(cfg: dict, log, tmp_path: Path) -> None:
    folder = tmp_path / "doc"
    folder.mkdir()
    (folder / "page.md").write_text("x", encoding="utf-8")
    (folder / "BIG.MOV").write_bytes(b"v")

    publish_sibling_assets(folder / "page.md", tmp_path / "out", cfg, log)

    assert not (tmp_path / "out" / "BIG.MOV").exists()


def test_one_failed_copy_does_not_stop_the_rest(cfg: dict, log, tmp_path: Path, monkeypatch) -> None:
    import shutil

    folder = tmp_path / "doc"
    folder.mkdir()
    (folder / "page.md").write_text("x", encoding="utf-8")
    (folder / "a.txt").write_text("a", encoding="utf-8")
    (folder / "b.txt").write_text("b", encoding="utf-8")

    real_copy2 = shutil.copy2

    def flaky_copy2(src, dst, *args, **kwargs):
        if Path(src).name == "a.txt":
            raise PermissionError("denied")
        return real_copy2(src, dst, *args, **kwargs)

    monkeypatch.setattr("folio.assets.shutil.copy2", flaky_copy2)

    copied = publish_sibling_assets(folder / "page.md", tmp_path / "out", cfg, log)

    assert copied == 1
    assert (tmp_path / "out" / "b.txt").exists()
    errors = log.of_kind("error")
    assert len(errors) == 1 and "a.txt" in errors[0].message


def test_missing_source_directory_is_logged(cfg: dict, log, tmp_path: Path) -> None:
    copied = publish_sibling_assets(tmp_path / "gone" / "page.md", tmp_path / "out", cfg, log)

    assert copied == 0
    assert log.of_kind("error")


def test_root_assets(cfg: dict, log) -> None:
    out = cfg["output_dir"]
    out.mkdir()

    copy_root_assets(cfg, log)

    assert (out / "style.css").exists()
    assert (out / "assets" / "logo.svg").exists()
    assert not (out / "assets" / "reel.mov").exists()


def test_missing_static_dir_is_a_warning(cfg: dict, log, tmp_path: Path) -> None:
    cfg = dict(cfg, static_dir=tmp_path / "nope")

    assert copy_root_assets(cfg, log) == 0
    assert log.of_kind("warning")


def test_project_assets_are_namespaced(cfg: dict, log) -> None:
    copy_project_assets(cfg, log)

    out = cfg["output_dir"] / "assets"
    assert (out / "alpha" / "a.png").read_bytes() == b"png"
    assert not (out / "alpha" / "index.md").exists()
    assert not (out / "beta").exists()
