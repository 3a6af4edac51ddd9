"""
Build pipeline: content tree in, output tree out.

A pass always reprocesses the whole content tree. A full pass deletes the
previous output first; an incremental pass (used by watch mode) skips only
that delete, so stray files in the output survive it.
"""
import enum
import shutil
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .assets import copy_project_assets, copy_root_assets, publish_sibling_assets
from .document import read_document
from .errors import ParseError, SiteBuildError, StructuralError, TemplateError
from .events import BuildLog
from .landing import write_landing_page
from .paths import is_root_primary, resolve_output_path
from .projects import collect_project_images
from .render import render_markdown
from .templates import compose_page, make_environment


class BuildState(enum.Enum):
    IDLE = "idle"
    CLEANING = "cleaning"
    COPYING_ROOT_ASSETS = "copying root assets"
    COPYING_PROJECT_ASSETS = "copying project assets"
    INDEXING_IMAGES = "indexing images"
    RENDERING_DOCUMENTS = "rendering documents"
    RENDERING_LANDING_PAGE = "rendering landing page"


@dataclass
class RenderedPage:
    output_path: Path
    html: str


@dataclass
class BuildResult:
    clean: bool
    pages: List[Path] = field(default_factory=list)
    failed: List[Path] = field(default_factory=list)
    projects: list = field(default_factory=list)


def find_documents(content_root: Path, cfg: dict) -> List[Path]:
    """All documents under content_root in a stable order, minus the root index."""
    docs = []
    for path in sorted(content_root.rglob(f"*{cfg['document_suffix']}")):
        if not path.is_file():
            continue
        if is_root_primary(path.relative_to(content_root), cfg["primary_name"]):
            continue
        docs.append(path)
    return docs


def render_document(path: Path, env, cfg: dict, log) -> RenderedPage:
    """Parse, render and template one document; copies its sibling assets."""
    content_root: Path = cfg["content_root"]
    output_dir: Path = cfg["output_dir"]

    record = read_document(path, content_root)
    content_html = render_markdown(record.body, log=log)

    out_path = output_dir / resolve_output_path(record.rel_path, cfg["primary_name"])
    out_path.parent.mkdir(parents=True, exist_ok=True)

    publish_sibling_assets(path, out_path.parent, cfg, log)

    page_html = compose_page(env, content_html, record.metadata, cfg)
    return RenderedPage(output_path=out_path, html=page_html)


def render_documents(cfg: dict, log, result: BuildResult):
    env = make_environment(cfg["templates_dir"])

    for path in find_documents(cfg["content_root"], cfg):
        try:
            page = render_document(path, env, cfg, log)
            page.output_path.write_text(page.html, encoding="utf-8")
        except (ParseError, TemplateError) as e:
            log.emit("error", f"Skipping {path}: {e}", path)
            result.failed.append(path)
            continue
        except (OSError, ValueError) as e:
            log.emit("error", f"Failed to build {path}: {e}", path)
            result.failed.append(path)
            continue

        result.pages.append(page.output_path)
        log.emit("document_rendered", f"Wrote {page.output_path}", page.output_path)


def _enter(state: BuildState, log):
    log.emit("stage", f"[{state.value}]")


def build_site(cfg: dict, clean: bool = True, log=None) -> BuildResult:
    """
    Run one build pass.

    Raises StructuralError when the content tree cannot be used; nothing is
    deleted in that case. Per-document and per-file problems are logged
    and the pass carries on.
    """
    log = log if log is not None else BuildLog()
    content_root: Path = cfg["content_root"]
    output_dir: Path = cfg["output_dir"]
    result = BuildResult(clean=clean)

    if not content_root.is_dir():
        raise StructuralError(f"Content directory not found: {content_root}")

    state = BuildState.IDLE
    try:
        if clean:
            state = BuildState.CLEANING
            _enter(state, log)
            if output_dir.exists():
                shutil.rmtree(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        state = BuildState.COPYING_ROOT_ASSETS
        _enter(state, log)
        copy_root_assets(cfg, log)

        state = BuildState.COPYING_PROJECT_ASSETS
        _enter(state, log)
        copy_project_assets(cfg, log)

        state = BuildState.INDEXING_IMAGES
        _enter(state, log)
        result.projects = collect_project_images(cfg, log)

        state = BuildState.RENDERING_DOCUMENTS
        _enter(state, log)
        render_documents(cfg, log, result)

        state = BuildState.RENDERING_LANDING_PAGE
        _enter(state, log)
        result.pages.append(write_landing_page(result.projects, cfg, log))
    except OSError as e:
        raise StructuralError(f"Build failed while {state.value}: {e}") from e

    _enter(BuildState.IDLE, log)
    log.emit("info", f"Build complete! {len(result.pages)} pages, {len(result.failed)} failed")
    return result


def run_build(cfg: dict, clean: bool, log) -> bool:
    """build_site for long-running callers: report a failed pass, don't raise."""
    try:
        build_site(cfg, clean=clean, log=log)
    except SiteBuildError as e:
        log.emit("error", f"Build failed: {e}")
        return False
    except Exception as e:
        log.emit("error", f"Build failed unexpectedly: {e!r}")
        return False
    return True


class RebuildQueue:
    """
    Serializes build passes.

    trigger() runs a pass right away when idle. Triggers that arrive while
    a pass is running collapse into a single follow-up pass, run by the
    thread that owns the current pass.
    """

    def __init__(self, build):
        self._build = build
        self._lock = threading.Lock()
        self._running = False
        self._pending = False

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def trigger(self) -> bool:
        """Returns True if this call ran the pass(es), False if it was queued."""
        with self._lock:
            if self._running:
                self._pending = True
                return False
            self._running = True

        try:
            while True:
                self._build()
                with self._lock:
                    if not self._pending:
                        self._running = False
                        return True
                    self._pending = False
        except BaseException:
            with self._lock:
                self._running = False
                self._pending = False
            raise
