import shutil
from pathlib import Path

from .errors import AssetCopyError


def is_skipped_video(path: Path, cfg: dict) -> bool:
    return path.suffix.lower() in cfg["skip_extensions"]


def copy_asset(src: Path, dest: Path):
    """Copy one file, creating the destination directory as needed."""
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
    except OSError as e:
        raise AssetCopyError(f"could not copy {src} to {dest}: {e}") from e


def _copy_files(files, dest_dir: Path, cfg: dict, log) -> int:
    """Copy files into dest_dir one by one; a failure only loses that file."""
    copied = 0
    for src in files:
        if is_skipped_video(src, cfg):
            log.emit("asset_skipped", f"Skipping large video file: {src}", src)
            continue
        try:
            copy_asset(src, dest_dir / src.name)
        except AssetCopyError as e:
            log.emit("error", str(e), src)
            continue
        copied += 1
        log.emit("asset_copied", f"Copied {src.name} to {dest_dir}", src)
    return copied


def _list_dir(directory: Path, log):
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        log.emit("error", f"could not list {directory}: {e}", directory)
        return []


def publish_sibling_assets(doc_path: Path, dest_dir: Path, cfg: dict, log) -> int:
    """
    Copy every non-document file next to doc_path into dest_dir,
    keeping file names. Returns the number of files copied.
    """
    siblings = [
        p for p in _list_dir(doc_path.parent, log)
        if p.is_file() and p.suffix.lower() != cfg["document_suffix"]
    ]
    return _copy_files(siblings, dest_dir, cfg, log)


def copy_directory(src: Path, dest: Path, cfg: dict, log) -> int:
    """Recursively copy src into dest, skipping large video files."""
    dest.mkdir(parents=True, exist_ok=True)
    copied = 0
    entries = _list_dir(src, log)
    for entry in entries:
        if entry.is_dir():
            copied += copy_directory(entry, dest / entry.name, cfg, log)
    copied += _copy_files([e for e in entries if e.is_file()], dest, cfg, log)
    return copied


def copy_root_assets(cfg: dict, log) -> int:
    """
    Copy the static directory into the output root.

    Top-level files land next to index.html; the assets/ subdirectory
    is copied recursively to <output>/assets/. Other subdirectories are
    left alone.
    """
    static_dir: Path = cfg["static_dir"]
    output_dir: Path = cfg["output_dir"]

    if not static_dir.is_dir():
        log.emit("warning", f"Static directory not found at {static_dir}", static_dir)
        return 0

    entries = sorted(static_dir.iterdir())
    copied = _copy_files([e for e in entries if e.is_file()], output_dir, cfg, log)

    assets_src = static_dir / "assets"
    if assets_src.is_dir():
        copied += copy_directory(assets_src, output_dir / "assets", cfg, log)
    return copied


def project_asset_dir(cfg: dict, name: str) -> Path:
    """Output directory for a project's assets, matching cfg['assets_url']."""
    return cfg["output_dir"].joinpath(*cfg["assets_url"].strip("/").split("/"), name)


def copy_project_assets(cfg: dict, log) -> int:
    """
    Copy the non-document files of every project into
    <output>/assets/<project>/ so the landing page images resolve.
    """
    projects_dir: Path = cfg["content_root"] / cfg["projects_dir"]
    if not projects_dir.is_dir():
        log.emit("warning", f"Projects directory not found at {projects_dir}", projects_dir)
        return 0

    copied = 0
    for project in sorted(projects_dir.iterdir()):
        if not project.is_dir():
            continue
        files = [
            p for p in _list_dir(project, log)
            if p.is_file() and p.suffix.lower() != cfg["document_suffix"]
        ]
        copied += _copy_files(files, project_asset_dir(cfg, project.name), cfg, log)
    return copied
