from __future__ import annotations

from pathlib import Path

import pytest

from folio.config import make_config
from folio.events import BuildLog

PAGE_TEMPLATE = """<html><head><title>{{ title }}</title></head>
<body>{{ content | safe }}</body></html>
"""

PROJECT_TEMPLATE = """<html><head><title>Project: {{ title }}</title></head>
<body><p class="year">{{ year }}</p>{{ content | safe }}</body></html>
"""


def write(path: Path, text: str = "", data: bytes | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if data is not None:
        path.write_bytes(data)
    else:
        path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A small project root: content tree, templates and static files."""
    content = tmp_path / "content"

    write(content / "index.md", "---\ntitle: Home\n---\nIgnored, the grid replaces it.\n")
    write(content / "about" / "index.md", "---\ntitle: About\n---\nHello **there**.\n")
    write(content / "about" / "photo.jpg", data=b"\xff\xd8jpeg")
    write(content / "about" / "clip.mp4", data=b"video")
    write(content / "articles" / "lamp.md", "---\ntitle: Lamp\n---\nA lamp article.\n")
    write(content / "notes.md", "Just a note without front matter.\n")

    write(
        content / "projects" / "alpha" / "index.md",
        "---\ntitle: Alpha\ntemplate: project\nyear: 2021\n---\n"
        "![first](./a.png)\n\nSome text.\n\n![second](https://ext.example/b.png)\n",
    )
    write(content / "projects" / "alpha" / "a.png", data=b"png")
    write(content / "projects" / "beta" / "index.md", "---\ntitle: Beta\n---\nNo pictures here.\n")

    write(tmp_path / "templates" / "page.html", PAGE_TEMPLATE)
    write(tmp_path / "templates" / "project.html", PROJECT_TEMPLATE)

    write(tmp_path / "src" / "style.css", "body { color: black; }\n")
    write(tmp_path / "src" / "assets" / "logo.svg", "<svg></svg>")
    write(tmp_path / "src" / "assets" / "reel.mov", data=b"video")
    return tmp_path


@pytest.fixture
def cfg(site: Path) -> dict:
    return make_config({}, site)


@pytest.fixture
def log() -> BuildLog:
    return BuildLog(echo=False)
