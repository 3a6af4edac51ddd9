from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from folio.paths import is_root_primary, resolve_output_path


@pytest.mark.parametrize(
    "rel, expected",
    [
        ("about/index.md", "about/index.html"),
        ("articles/lamp.md", "articles/lamp/index.html"),
        ("notes.md", "notes/index.html"),
        ("a/b/c/d/index.md", "a/b/c/d/index.html"),
        ("a/b/c/d/deep.md", "a/b/c/d/deep/index.html"),
    ],
)
def test_resolve_output_path(rel: str, expected: str) -> None:
    assert resolve_output_path(Path(rel)) == PurePosixPath(expected)


def test_primary_document_is_one_level_shallower() -> None:
    primary = resolve_output_path("x/y/index.md")
    other = resolve_output_path("x/y/page.md")

    assert str(primary).endswith("/index.html")
    assert str(other).endswith("/index.html")
    assert len(primary.parts) == len(other.parts) - 1


def test_custom_primary_name() -> None:
    assert resolve_output_path("docs/_index.md", primary_name="_index") == PurePosixPath("docs/index.html")


def test_root_primary_detection() -> None:
    assert is_root_primary("index.md")
    assert not is_root_primary("about/index.md")
    assert not is_root_primary("notes.md")
