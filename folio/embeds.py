"""
Video embeds.

Two rewrites turn video references into player markup:

  * shortcodes in the raw markdown body, e.g. `youtube: dQw4w9WgXcQ`
  * images whose source points at a known video host, e.g.
    ![Demo](https://www.youtube.com/watch?v=dQw4w9WgXcQ)

Image rules are tried in order and the first one that matches wins.
An image no rule claims is left as the <img> the markdown renderer made.
"""
import html
import re
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup  # pip install beautifulsoup4

from .errors import EmbedExtractionError

VIDEO_ID_RE = re.compile(r"^[a-zA-Z0-9_-]+$")

# `youtube: ID` / `vimeo: ID` inside backticks
SHORTCODE_RE = re.compile(r"`(youtube|vimeo):\s*([a-zA-Z0-9_-]+)`")

PLAYER_URLS = {
    "youtube": "https://www.youtube.com/embed/{id}",
    "vimeo": "https://player.vimeo.com/video/{id}",
}


def embed_html(player_url: str, title: Optional[str] = None) -> str:
    """Return the player block for an iframe source."""
    title_attr = ""
    if title is not None:
        title_attr = f' title="{html.escape(title, quote=True)}"'
    return (
        '<div class="video-embed">\n'
        f'  <iframe src="{html.escape(player_url, quote=True)}" frameborder="0" allowfullscreen{title_attr}></iframe>\n'
        "</div>"
    )


def expand_shortcodes(body: str, store=None) -> str:
    """
    Replace video shortcodes in a markdown body with player blocks.

    With store, each block is passed through it and its return value
    (e.g. a markdown raw-HTML placeholder) goes into the body instead.
    """

    def _replace(m):
        player_url = PLAYER_URLS[m.group(1)].format(id=m.group(2))
        block = embed_html(player_url)
        return store(block) if store is not None else block

    return SHORTCODE_RE.sub(_replace, body)


def _checked_id(video_id: str, src: str) -> str:
    if not VIDEO_ID_RE.match(video_id or ""):
        raise EmbedExtractionError(f"could not find a video id in {src!r}")
    return video_id


def _is_youtube(src: str) -> bool:
    return "youtube.com/watch?v=" in src or "youtu.be/" in src


def _youtube_id(src: str) -> str:
    parsed = urlparse(src)
    if "youtu.be/" in src:
        video_id = parsed.path.lstrip("/").split("/")[0]
    else:
        video_id = (parse_qs(parsed.query).get("v") or [""])[0]
    return _checked_id(video_id, src)


def _is_vimeo(src: str) -> bool:
    return "vimeo.com/" in src


def _vimeo_id(src: str) -> str:
    tail = src.split("vimeo.com/", 1)[1]
    video_id = re.split(r"[/?#]", tail, maxsplit=1)[0]
    return _checked_id(video_id, src)


@dataclass(frozen=True)
class EmbedRule:
    name: str
    matches: Callable[[str], bool]
    extract_id: Callable[[str], str]
    player_url: str

    def render(self, src: str, alt: str) -> str:
        video_id = self.extract_id(src)
        return embed_html(self.player_url.format(id=video_id), title=alt)


IMAGE_RULES = (
    EmbedRule("youtube", _is_youtube, _youtube_id, PLAYER_URLS["youtube"]),
    EmbedRule("vimeo", _is_vimeo, _vimeo_id, PLAYER_URLS["vimeo"]),
)


def render_image(src: str, alt: str, log=None, rules=IMAGE_RULES) -> Optional[str]:
    """
    Try the image rules in order for one image.

    Returns player markup from the first matching rule, or None when the
    image should keep its default rendering. A rule that matches but
    cannot extract a video id is logged and treated as no match.
    """
    for rule in rules:
        if not rule.matches(src):
            continue
        try:
            return rule.render(src, alt)
        except EmbedExtractionError as e:
            if log is not None:
                log.emit("render_error", f"{rule.name} embed failed, keeping image: {e}")
            return None
    return None


def rewrite_media_images(html_fragment: str, log=None) -> str:
    """
    Swap <img> tags that point at video hosts for player blocks.

    An image that is the only thing in its paragraph replaces the whole
    paragraph, so the block-level <div> is not nested inside a <p>.
    """
    soup = BeautifulSoup(html_fragment, "html.parser")
    changed = False

    for img in soup.find_all("img"):
        replacement = render_image(img.get("src", ""), img.get("alt", ""), log=log)
        if replacement is None:
            continue

        embed = BeautifulSoup(replacement, "html.parser").div
        parent = img.parent
        if (
            parent is not None
            and parent.name == "p"
            and not parent.get_text(strip=True)
            and len(parent.find_all(True)) == 1
        ):
            parent.replace_with(embed)
        else:
            img.replace_with(embed)
        changed = True

    if not changed:
        return html_fragment
    return str(soup)
