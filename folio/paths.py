from pathlib import Path, PurePosixPath

OUTPUT_FILENAME = "index.html"


def resolve_output_path(rel_path, primary_name: str = "index") -> PurePosixPath:
    """
    Map a document path (relative to the content root) to its output
    path (relative to the output root).

      about/index.md        -> about/index.html
      articles/lamp.md      -> articles/lamp/index.html
      notes.md              -> notes/index.html
    """
    rel = PurePosixPath(Path(rel_path).as_posix())
    if rel.stem == primary_name:
        return rel.parent / OUTPUT_FILENAME
    return rel.parent / rel.stem / OUTPUT_FILENAME


def is_root_primary(rel_path, primary_name: str = "index") -> bool:
    """True for the content root's own primary document."""
    rel = PurePosixPath(Path(rel_path).as_posix())
    return rel.parent == PurePosixPath(".") and rel.stem == primary_name
