"""
Operator-facing web surface.

A small Flask application exposing the four operator actions:

* ``GET /`` – the page with the job title input.
* ``POST /generate`` – request a blueprint and render it.
* ``POST /feedback`` – thumbs-up/down on one item.
* ``GET /download`` – the current blueprint as a ``.docx`` attachment.

The :class:`~jobblueprint.state.BlueprintState` lives on the app
object (``app.extensions["blueprint_state"]``) and is passed explicitly
to every handler.  The provider is resolved on first use, so the page
and the empty-title path work without an API key.
"""

from __future__ import annotations

import io
import logging
from typing import Optional

from flask import Flask, current_app, request, send_file

from .config import Settings, load_settings
from .errors import BlueprintError, ConfigurationError, NoBlueprintError
from .export import DOCX_MIMETYPE, document_filename, export_current
from .feedback import FeedbackSink, LocalFeedbackSink, record_feedback
from .generate import LLMProvider, get_default_provider, request_blueprint
from .render import render, render_error, render_message, render_page
from .state import BlueprintState

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _state() -> BlueprintState:
    return current_app.extensions["blueprint_state"]


def _provider() -> LLMProvider:
    provider = current_app.extensions.get("blueprint_provider")
    if provider is None:
        provider = get_default_provider(current_app.extensions["blueprint_settings"])
        current_app.extensions["blueprint_provider"] = provider
    return provider


def _page_for_state(state: BlueprintState, messages=None, job_title: str = "") -> str:
    if state.current is None:
        return render_page(job_title=job_title, messages=messages)
    return render_page(
        job_title=job_title or state.current.job_title,
        output_html=render(state.current, state.acknowledged),
        show_download=True,
        messages=messages,
    )


def index():
    return _page_for_state(_state())


def generate():
    state = _state()
    job_title = (request.form.get("job_title") or "").strip()
    if not job_title:
        return render_page(output_html=render_message("Please enter a job title."))
    settings: Settings = current_app.extensions["blueprint_settings"]
    try:
        blueprint = request_blueprint(job_title, provider=_provider(), generation=settings.generation)
    except BlueprintError as exc:
        logger.error("Error in generate: %s", exc)
        status = 500 if isinstance(exc, ConfigurationError) else 502
        return render_page(job_title=job_title, output_html=render_error(exc)), status
    state.replace(blueprint)
    return _page_for_state(state, job_title=job_title)


def feedback():
    state = _state()
    sink: FeedbackSink = current_app.extensions["blueprint_feedback_sink"]
    section = request.form.get("section", "")
    positive = (request.form.get("positive") or "").lower() in _TRUE_VALUES
    try:
        index = int(request.form.get("index", ""))
        event = record_feedback(state, section, index, positive, sink=sink)
    except NoBlueprintError as exc:
        return render_page(output_html=render_message(str(exc), css_class="error")), 400
    except (ValueError, IndexError) as exc:
        logger.warning("Rejected feedback for %s[%s]: %s", section, request.form.get("index"), exc)
        return _page_for_state(state, messages=[f"Invalid feedback target: {exc}"]), 400
    return _page_for_state(state, messages=[event.acknowledgement])


def download():
    state = _state()
    try:
        data = export_current(state)
    except NoBlueprintError as exc:
        return render_page(output_html=render_message(str(exc), css_class="error")), 404
    return send_file(
        io.BytesIO(data),
        mimetype=DOCX_MIMETYPE,
        as_attachment=True,
        download_name=document_filename(state.require()),
    )


def create_app(
    settings: Optional[Settings] = None,
    *,
    provider: Optional[LLMProvider] = None,
    state: Optional[BlueprintState] = None,
    feedback_sink: Optional[FeedbackSink] = None,
) -> Flask:
    """Build the Flask application.

    Args:
        settings: Resolved settings; loaded from the environment when omitted.
        provider: Provider to use instead of resolving one from settings.
        state: Pre-existing state, mainly for tests.
        feedback_sink: Destination for feedback; defaults to the local sink.
    """
    app = Flask(__name__)
    app.extensions["blueprint_settings"] = settings or load_settings()
    app.extensions["blueprint_state"] = state or BlueprintState()
    app.extensions["blueprint_provider"] = provider
    app.extensions["blueprint_feedback_sink"] = feedback_sink or LocalFeedbackSink()
    app.add_url_rule("/", "index", index, methods=["GET"])
    app.add_url_rule("/generate", "generate", generate, methods=["POST"])
    app.add_url_rule("/feedback", "feedback", feedback, methods=["POST"])
    app.add_url_rule("/download", "download", download, methods=["GET"])
    return app
