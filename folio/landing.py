import html
from pathlib import Path


def render_tiles(projects) -> str:
    """One linked image tile per image, entries and images in order."""
    tiles = []
    for project in projects:
        href = html.escape(project.url, quote=True)
        alt = html.escape(project.title, quote=True)
        for image in project.images:
            src = html.escape(image, quote=True)
            tiles.append(f'<a href="{href}"><img src="{src}" alt="{alt}" loading="lazy"></a>')
    return "\n    ".join(tiles)


def render_link_group(label: str, links, *, external: bool = False) -> str:
    if not links:
        return ""
    target = ' target="_blank" rel="noopener"' if external else ""
    buttons = "\n          ".join(
        f'<a href="{html.escape(link["url"], quote=True)}" class="nav-button"{target}>'
        f'{html.escape(link["label"])}</a>'
        for link in links
    )
    return f"""
      <div class="button-group">
        <div class="button-group-label">{html.escape(label)}:</div>
        <div class="button-row">
          {buttons}
        </div>
      </div>"""


def render_panel(panel: dict) -> str:
    """The fixed navigation panel shown over the grid."""
    title = html.escape(panel["title"])

    message_html = ""
    if panel.get("message"):
        message = html.escape(panel["message"]).replace("\n", "<br>")
        message_html = f"""
      <div class="dialog-text">{message}</div>"""

    internal_html = render_link_group("Internal", panel["internal"])
    external_html = render_link_group("External", panel["external"], external=True)

    return f"""<div class="floating-window">
    <div class="window-header">
      <span class="window-title">{title}</span>
    </div>
    <div class="window-content">{message_html}
      <div class="button-section">{internal_html}{external_html}
      </div>
    </div>
  </div>"""


def render_landing_page(projects, cfg: dict) -> str:
    """
    Render the site's index.html: an image grid linking to every project,
    plus the navigation panel from config.
    """
    site_title = html.escape(cfg["site_title"])
    tiles_html = render_tiles(projects)
    panel_html = render_panel(cfg["panel"])

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{site_title}</title>
  <style>
    * {{ margin: 0; padding: 0; box-sizing: border-box; }}
    body {{ font-family: system-ui, sans-serif; }}
    .grid {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); }}
    .grid img {{ width: 100%; height: 200px; object-fit: cover; display: block; }}
    .grid a {{ display: block; }}
    .floating-window {{ position: fixed; top: 50px; left: 50px; width: 300px; background: #c0c0c0; padding: 8px; }}
  </style>
</head>
<body>
  <div class="grid">
    {tiles_html}
  </div>

  {panel_html}
</body>
</html>
"""


def write_landing_page(projects, cfg: dict, log) -> Path:
    out_path = cfg["output_dir"] / "index.html"
    out_path.write_text(render_landing_page(projects, cfg), encoding="utf-8")
    log.emit("page_written", f"Wrote {out_path}", out_path)
    return out_path
