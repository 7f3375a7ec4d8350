"""
HTML rendering.

Pages are rendered through a single function, ``render``, that maps a
template name and a data mapping to encoded bytes.  Jinja2 errors of
any kind surface as :class:`RenderError` so callers have one thing to
catch.
"""

import logging
from functools import lru_cache
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from .config import settings
from .exceptions import RenderError


logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def get_environment(templates_dir: str) -> Environment:
    """Return the Jinja2 environment for ``templates_dir``."""
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
    )


def render(template_name: str, data: Mapping[str, Any], *, templates_dir: str | None = None) -> bytes:
    """Render ``template_name`` with ``data`` and return UTF‑8 bytes.

    Raises
    ------
    RenderError
        If the template is missing, has a syntax error, or fails while
        rendering.
    """
    env = get_environment(templates_dir or settings.templates_dir)
    try:
        template = env.get_template(template_name)
        return template.render(**data).encode("utf-8")
    except (TemplateError, TypeError, ValueError) as exc:
        logger.error("Template error in %s: %s", template_name, exc)
        raise RenderError(f"Failed to render {template_name}: {exc}") from exc
