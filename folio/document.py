from dataclasses import dataclass, field
from pathlib import Path

import yaml  # pip install pyyaml

from .errors import ParseError

FRONT_MATTER_MARKER = "---"


@dataclass(frozen=True)
class DocumentRecord:
    rel_path: Path
    metadata: dict = field(default_factory=dict)
    body: str = ""


def parse_document(text: str):
    """
    Split a document into (metadata, body).

    Front matter is a YAML block that opens on the very first line with
    "---" and closes at the next "---" line:

      ---
      title: Lamp
      template: page
      ---
      Body in markdown.

    No opening marker means no metadata; the whole text is the body.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_MARKER:
        return {}, text

    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_MARKER:
            block = "".join(lines[1:i])
            body = "".join(lines[i + 1:])
            break
    else:
        raise ParseError("front matter opened with '---' but never closed")

    try:
        metadata = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid front matter: {e}") from e

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise ParseError("front matter must be a mapping of keys to values")

    return {str(k): v for k, v in metadata.items()}, body


def read_document(path: Path, content_root: Path) -> DocumentRecord:
    """Read and parse one document under content_root."""
    text = path.read_text(encoding="utf-8")
    metadata, body = parse_document(text)
    return DocumentRecord(rel_path=path.relative_to(content_root), metadata=metadata, body=body)
