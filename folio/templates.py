from pathlib import Path

from jinja2 import (  # pip install jinja2
    Environment,
    FileSystemLoader,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from .errors import TemplateError

TEMPLATE_SUFFIX = ".html"


def make_environment(templates_dir: Path) -> Environment:
    """Jinja environment for one build pass."""
    return Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=select_autoescape(["html"]),
    )


def page_context(content_html: str, metadata: dict, cfg: dict) -> dict:
    """
    Template variables for a page: every front matter field, then
    title (with a default) and the rendered content.
    """
    context = dict(metadata)
    context["title"] = metadata.get("title") or cfg["default_title"]
    context["content"] = content_html
    return context


def compose_page(env: Environment, content_html: str, metadata: dict, cfg: dict) -> str:
    """Render a page through the template named in its front matter."""
    name = metadata.get("template") or cfg["default_template"]
    try:
        template = env.get_template(f"{name}{TEMPLATE_SUFFIX}")
    except TemplateNotFound as e:
        raise TemplateError(f"unknown template {name!r}") from e
    except TemplateSyntaxError as e:
        raise TemplateError(f"template {name!r} is broken: {e}") from e
    try:
        return template.render(**page_context(content_html, metadata, cfg))
    except JinjaTemplateError as e:
        raise TemplateError(f"template {name!r} failed to render: {e}") from e
    except (TypeError, ValueError, ArithmeticError, LookupError, AttributeError) as e:
        raise TemplateError(f"template {name!r} failed to render: {e!r}") from e
