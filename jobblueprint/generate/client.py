"""
Blueprint request client.

Glues the prompt, a provider and the parser together.  A request is a
single attempt: any failure surfaces immediately as a typed error.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import GenerationConfig, load_settings
from ..errors import BlueprintError
from ..schema import Blueprint
from .llm_providers import LLMProvider, get_default_provider
from .parser import parse_blueprint
from .prompt import build_prompt

logger = logging.getLogger(__name__)


def request_blueprint(
    job_title: str,
    provider: Optional[LLMProvider] = None,
    generation: Optional[GenerationConfig] = None,
) -> Blueprint:
    """Generate a blueprint for ``job_title``.

    Args:
        job_title: Job title to describe.  Callers are expected to have
            rejected empty titles already.
        provider: Provider to use.  Resolved from settings when omitted.
        generation: Sampling parameters.  Defaults to the configured
            (or built-in) values.

    Returns:
        The validated :class:`Blueprint`.

    Raises:
        ApiError, EmptyResponseError, MalformedJsonError, SchemaError:
            Propagated unchanged from the provider and parser.
        ConfigurationError: If no provider is given and none can be
            resolved.
    """
    if provider is None or generation is None:
        settings = load_settings()
        provider = provider or get_default_provider(settings)
        generation = generation or settings.generation
    prompt = build_prompt(job_title)
    logger.info("Requesting blueprint for '%s' via %s", job_title, provider.__class__.__name__)
    try:
        text = provider.generate_text(prompt, generation)
        logger.debug("Extracted text content: %s", text)
        blueprint = parse_blueprint(text)
    except BlueprintError as exc:
        logger.error("Blueprint request for '%s' failed: %s", job_title, exc)
        raise
    logger.info(
        "Blueprint for '%s' has %d responsibilities, %d skills, %d qualifications",
        blueprint.job_title,
        len(blueprint.responsibilities),
        len(blueprint.required_skills),
        len(blueprint.qualifications),
    )
    return blueprint
