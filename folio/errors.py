class SiteBuildError(Exception):
    """Base class for build failures."""


class ParseError(SiteBuildError):
    """Front matter block is malformed (unterminated, bad YAML, not a mapping)."""


class RenderError(SiteBuildError):
    """A region of a document could not be rendered."""


class EmbedExtractionError(RenderError):
    """A video URL matched a host but no video id could be pulled out of it."""


class TemplateError(SiteBuildError):
    """The requested page template is missing or broken."""


class AssetCopyError(SiteBuildError):
    """A single asset file could not be copied."""


class StructuralError(SiteBuildError):
    """The content tree itself is unusable; the build pass is aborted."""
