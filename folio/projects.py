import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .document import parse_document
from .errors import ParseError

# ![alt](ref) or ![alt](ref "title")
IMAGE_REF_RE = re.compile(r"!\[.*?\]\((.*?)\)")
URL_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


@dataclass
class ProjectEntry:
    name: str
    title: str
    images: List[str] = field(default_factory=list)
    url: str = ""


def normalize_image_path(ref: str, project_name: str, cfg: dict) -> str:
    """
    Turn an image reference from a project body into a site path.

      ./a.png                -> /assets/<project>/a.png
      a.png                  -> /assets/<project>/a.png
      https://ext/b.png      -> unchanged
      /rooted.png            -> /assets/<project>/rooted.png
      //cdn.example/c.png    -> unchanged
    """
    if URL_SCHEME_RE.match(ref) or ref.startswith("//"):
        return ref
    if ref.startswith("./"):
        ref = ref[2:]
    ref = ref.lstrip("/")
    return f"{cfg['assets_url']}/{project_name}/{ref}"


def extract_image_refs(body: str) -> List[str]:
    """Image references in markdown body order, without any link title."""
    refs = []
    for m in IMAGE_REF_RE.finditer(body):
        target = m.group(1).strip()
        if not target:
            continue
        refs.append(target.split()[0].strip("<>"))
    return refs


def collect_project_images(cfg: dict, log) -> List[ProjectEntry]:
    """
    Scan <content>/<projects>/*/index.md and collect every referenced image.

    Projects without a readable primary document, and projects with no
    images, are left out.
    """
    projects_dir: Path = cfg["content_root"] / cfg["projects_dir"]
    projects = []

    if not projects_dir.is_dir():
        return projects

    for project_dir in sorted(projects_dir.iterdir()):
        if not project_dir.is_dir():
            continue

        name = project_dir.name
        doc_path = project_dir / f"{cfg['primary_name']}{cfg['document_suffix']}"
        if not doc_path.is_file():
            continue

        try:
            metadata, body = parse_document(doc_path.read_text(encoding="utf-8"))
        except (OSError, ValueError, ParseError) as e:
            log.emit("warning", f"Skipping project {name}: {e}", doc_path)
            continue

        images = [normalize_image_path(ref, name, cfg) for ref in extract_image_refs(body)]
        if not images:
            continue

        projects.append(
            ProjectEntry(
                name=name,
                title=str(metadata.get("title") or name),
                images=images,
                url=f"/{cfg['projects_dir'].strip('/')}/{name}/",
            )
        )

    log.emit("info", f"Indexed {len(projects)} projects with images")
    return projects
