import markdown  # pip install markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .embeds import expand_shortcodes, rewrite_media_images

MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "smarty", "pymdownx.magiclink"]


class ShortcodePreprocessor(Preprocessor):
    """
    Expands video shortcodes into stashed raw HTML.

    The player block is kept out of markdown's hands until the end, so a
    shortcode alone in a paragraph replaces that paragraph and one inside
    a sentence stays in it without being split across lines.
    """

    def run(self, lines):
        text = expand_shortcodes("\n".join(lines), store=self.md.htmlStash.store)
        return text.split("\n")


class ShortcodeExtension(Extension):
    def extendMarkdown(self, md):
        # after html_block (20) so raw HTML the author wrote is stashed first
        md.preprocessors.register(ShortcodePreprocessor(md), "video_shortcodes", 15)


def render_markdown(body: str, log=None) -> str:
    """
    Render a document body to an HTML fragment.

    Shortcodes are expanded while markdown reads the text; video-host
    images are rewritten afterwards, one <img> at a time.
    """
    raw_html = markdown.markdown(body, extensions=MARKDOWN_EXTENSIONS + [ShortcodeExtension()])
    return rewrite_media_images(raw_html, log=log)
