import sys
from pathlib import Path

import yaml  # pip install pyyaml

DEFAULT_CONFIG_FILENAME = "config.yml"

DEFAULT_SKIP_EXTENSIONS = [".mp4", ".mov", ".avi", ".wmv"]

DEFAULT_PANEL = {
    "title": "Website Navigation",
    "message": "",
    "internal": [
        {"label": "About Me", "url": "/about/"},
        {"label": "Articles", "url": "/articles/"},
        {"label": "All Projects", "url": "/projects/"},
    ],
    "external": [],
}


def get_config_path_from_args(args) -> Path:
    """
    Determine which config file to use.

    - If a positional path is passed, use that.
    - Otherwise, assume config.yml in the current directory.
    """
    positional = [a for a in args if not a.startswith("-")]
    if positional:
        return Path(positional[0]).resolve()
    return (Path.cwd() / DEFAULT_CONFIG_FILENAME).resolve()


def _as_links(value):
    """Normalize a panel link group into a list of {label, url} dicts."""
    if not isinstance(value, list):
        return []
    links = []
    for item in value:
        if isinstance(item, dict) and item.get("url"):
            links.append({"label": str(item.get("label") or item["url"]), "url": str(item["url"])})
    return links


def make_config(data: dict, project_root: Path) -> dict:
    """
    Apply defaults to raw config data and resolve directories
    relative to project_root.
    """
    data = data or {}

    # skip_extensions can be a string or a list
    skip = data.get("skip_extensions", DEFAULT_SKIP_EXTENSIONS)
    if isinstance(skip, str):
        skip = [skip]
    skip_extensions = {
        (s if s.startswith(".") else f".{s}").lower() for s in (str(x) for x in skip)
    }

    panel_data = data.get("panel") or {}
    panel = {
        "title": str(panel_data.get("title", DEFAULT_PANEL["title"])),
        "message": str(panel_data.get("message", DEFAULT_PANEL["message"])),
        "internal": _as_links(panel_data.get("internal", DEFAULT_PANEL["internal"])),
        "external": _as_links(panel_data.get("external", DEFAULT_PANEL["external"])),
    }

    cfg = {
        "site_title": data.get("site_title", "Portfolio"),
        "content_root": (project_root / data.get("content_root", "content")).resolve(),
        "output_dir": (project_root / data.get("output_dir", "dist")).resolve(),
        "static_dir": (project_root / data.get("static_dir", "src")).resolve(),
        "templates_dir": (project_root / data.get("templates_dir", "templates")).resolve(),
        # subtree of content_root holding one directory per project
        "projects_dir": data.get("projects_dir", "projects"),
        "assets_url": "/" + str(data.get("assets_url", "/assets")).strip("/"),
        "primary_name": data.get("primary_name", "index"),
        "document_suffix": ".md",
        "default_template": data.get("default_template", "page"),
        "default_title": data.get("default_title", "Untitled"),
        "skip_extensions": skip_extensions,
        "panel": panel,
    }
    return cfg


def load_config(config_path: Path) -> dict:
    """Load YAML config and apply defaults."""
    if not config_path.exists():
        print(f"Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    return make_config(data, config_path.parent)
