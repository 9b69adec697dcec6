"""
Prompt construction for blueprint generation.

The model is asked for a JSON object with exactly the Blueprint wire
keys.  It usually wraps the object in prose or markdown fences, which
the parser tolerates.
"""

from __future__ import annotations

import textwrap

_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    Generate a job blueprint for the position of {job_title}. Include responsibilities, required skills, and qualifications. Format the output as a JSON object with the following structure:
    {{
        "jobTitle": "The job title",
        "responsibilities": ["Responsibility 1", "Responsibility 2", ...],
        "requiredSkills": ["Skill 1", "Skill 2", ...],
        "qualifications": ["Qualification 1", "Qualification 2", ...]
    }}"""
)


def build_prompt(job_title: str) -> str:
    """Return the single-turn instruction for ``job_title``."""
    return _PROMPT_TEMPLATE.format(job_title=job_title)
