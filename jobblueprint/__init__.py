"""
Job blueprint generator.

Takes a job title, asks a generative language API for a "job
blueprint" (responsibilities, required skills, qualifications),
renders it as an HTML table with per-item feedback buttons and exports
it as a Word document.

The package is split by stage:

1. **generate** – build the prompt, call the provider (Gemini REST by
   default), and extract/validate the JSON answer into a `Blueprint`.
2. **render** – turn a `Blueprint` into table markup and the operator
   page.
3. **feedback** – acknowledge thumbs-up/down on individual items
   through a pluggable sink.
4. **export** – pack a `Blueprint` into a `.docx` document.
5. **web** / **cli** – the Flask page and the command line entry point
   wiring the stages together around a `BlueprintState`.
"""

from importlib import metadata  # noqa: F401 (expose package version)

from .errors import (  # noqa: F401
    ApiError,
    BlueprintError,
    ConfigurationError,
    EmptyResponseError,
    MalformedJsonError,
    NoBlueprintError,
    SchemaError,
)
from .schema import SECTIONS, Blueprint  # noqa: F401
from .state import BlueprintState  # noqa: F401
