"""
HTML rendering.

Renders a Blueprint as a two-column table with per-item feedback
buttons, plus the surrounding operator page and message/error views.
Templates live in ``templates/`` next to this module and are rendered
with Jinja2 autoescaping, so model output is always escaped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Collection, Dict, List, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from ..errors import MalformedJsonError
from ..schema import SECTIONS, Blueprint

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)


def _rows(blueprint: Blueprint, acknowledged: Collection[Tuple[str, int]]) -> List[Dict[str, object]]:
    rows: List[Dict[str, object]] = []
    for key, attr, label in SECTIONS:
        items = [
            {"index": index, "text": text, "acknowledged": (key, index) in acknowledged}
            for index, text in enumerate(getattr(blueprint, attr))
        ]
        rows.append({"key": key, "label": label, "items": items})
    return rows


def render(
    blueprint: Blueprint,
    acknowledged: Collection[Tuple[str, int]] = (),
    *,
    feedback_url: str = "/feedback",
) -> str:
    """Render ``blueprint`` as a feedback-augmented HTML table.

    The first row holds the job title spanning both columns; each
    following row holds one section label and its items as a list.
    Every item carries a thumbs-up and a thumbs-down button posting
    ``section``, ``index`` and ``positive`` to ``feedback_url``.

    Args:
        blueprint: The blueprint to render.  It is not modified.
        acknowledged: ``(section, index)`` pairs that already received
            feedback; their buttons are rendered de-emphasized.
        feedback_url: Form action for the feedback buttons.

    Returns:
        The table markup.
    """
    template = _env.get_template("blueprint_table.html")
    return template.render(
        job_title=blueprint.job_title,
        rows=_rows(blueprint, acknowledged),
        feedback_url=feedback_url,
    )


def render_message(text: str, css_class: str = "message") -> str:
    """Render a plain status line such as "Generating blueprint..."."""
    return _env.get_template("message.html").render(text=text, css_class=css_class, raw_text=None)


def render_error(error: Exception) -> str:
    """Render an error for the output area.

    :class:`MalformedJsonError` additionally shows the raw upstream
    text verbatim so prompt/response drift can be diagnosed.
    """
    raw_text = error.raw_text if isinstance(error, MalformedJsonError) else None
    return _env.get_template("message.html").render(
        text=f"Error generating blueprint: {error}",
        css_class="error",
        raw_text=raw_text,
    )


def render_page(
    *,
    job_title: str = "",
    output_html: str = "",
    show_download: bool = False,
    messages: Optional[Sequence[str]] = None,
    generate_url: str = "/generate",
    download_url: str = "/download",
) -> str:
    """Render the full operator page around ``output_html``.

    The download link is only present when ``show_download`` is true,
    i.e. when a valid Blueprint is available.
    """
    return _env.get_template("page.html").render(
        job_title=job_title,
        output_html=Markup(output_html),
        show_download=show_download,
        messages=list(messages or []),
        generate_url=generate_url,
        download_url=download_url,
    )
