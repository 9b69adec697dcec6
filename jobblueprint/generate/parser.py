"""
Response parsing.

Locates the first JSON object embedded in the model's text answer and
validates it into a :class:`~jobblueprint.schema.Blueprint`.

Extraction walks the ``{`` characters in the text and hands the
remainder to ``json.JSONDecoder.raw_decode``, which stops at the end of
the first complete value.  Braces inside string literals and trailing
prose after the object are therefore harmless.  A ``{`` whose next token
cannot start an object member (prose such as ``{format}``) is skipped;
once decoding gets past that first token the object counts as located,
and a decode failure there is reported as malformed rather than retried
at a nested brace.  A known gap remains: if the model emits some other
JSON object before the blueprint, that earlier object is the one
validated and fails with :class:`SchemaError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from ..errors import MalformedJsonError, SchemaError
from ..schema import Blueprint

logger = logging.getLogger(__name__)

_DECODER = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


def _first_token(text: str, start: int) -> int:
    pos = start + 1
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def extract_json_object(text: str) -> Dict[str, Any]:
    """Return the first JSON object found in ``text``.

    Args:
        text: Raw candidate text from the model.

    Returns:
        The decoded object.

    Raises:
        MalformedJsonError: If ``text`` holds no object at all, or if the
            located object fails to decode.  The error carries the
            original text.
    """
    start = text.find("{")
    while start != -1:
        try:
            value, _ = _DECODER.raw_decode(text, start)
        except json.JSONDecodeError as exc:
            if exc.pos > _first_token(text, start):
                raise MalformedJsonError(
                    f"Failed to parse JSON from API response: {exc.msg}",
                    raw_text=text,
                ) from exc
        else:
            if isinstance(value, dict):
                return value
        start = text.find("{", start + 1)
    raise MalformedJsonError(
        "No valid JSON found in the API response",
        raw_text=text,
    )


def parse_blueprint(text: str) -> Blueprint:
    """Extract and validate a Blueprint from the model's text answer.

    Raises:
        MalformedJsonError: See :func:`extract_json_object`.
        SchemaError: If the object lacks required fields or types.
    """
    data = extract_json_object(text)
    logger.debug("Parsed JSON data: %s", data)
    try:
        return Blueprint.from_dict(data)
    except SchemaError:
        logger.error("Parsed data does not have the expected structure: %s", data)
        raise
