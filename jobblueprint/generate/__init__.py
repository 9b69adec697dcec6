"""
Generation subsystem.

Turns a job title into a validated :class:`~jobblueprint.schema.Blueprint`:

* `prompt` – builds the single-turn instruction.
* `llm_providers` – sends it to Gemini (REST or SDK) or OpenAI.
* `parser` – locates the JSON object in the answer and validates it.
* `client` – `request_blueprint`, which runs the three in sequence.
"""

from .prompt import build_prompt  # noqa: F401
from .llm_providers import (  # noqa: F401
    GeminiRestProvider,
    GeminiSDKProvider,
    LLMProvider,
    OpenAIProvider,
    get_default_provider,
)
from .parser import extract_json_object, parse_blueprint  # noqa: F401
from .client import request_blueprint  # noqa: F401
