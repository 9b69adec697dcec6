"""
Word document export.

Serializes a Blueprint into a ``.docx`` document with python-docx: a
level-1 heading with the job title, then one level-2 heading per
section followed by one paragraph per item, in the original order.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Optional

import docx  # type: ignore

from ..errors import NoBlueprintError
from ..schema import SECTIONS, Blueprint
from ..state import BlueprintState

logger = logging.getLogger(__name__)

DOCX_MIMETYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def document_filename(blueprint: Blueprint) -> str:
    """Return the download name, ``"<jobTitle> Blueprint.docx"``."""
    return f"{blueprint.job_title} Blueprint.docx"


def build_document(blueprint: Blueprint) -> "docx.document.Document":
    """Build the python-docx document for ``blueprint``."""
    document = docx.Document()
    document.add_heading(blueprint.job_title, level=1)
    for _, attr, label in SECTIONS:
        document.add_heading(f"{label}:", level=2)
        for item in getattr(blueprint, attr):
            document.add_paragraph(item)
    return document


def export_as_document(blueprint: Optional[Blueprint]) -> bytes:
    """Return ``blueprint`` packed as ``.docx`` bytes.

    Raises:
        NoBlueprintError: If ``blueprint`` is ``None``.
    """
    if blueprint is None:
        raise NoBlueprintError("Please generate a blueprint first.")
    buffer = io.BytesIO()
    build_document(blueprint).save(buffer)
    data = buffer.getvalue()
    logger.debug("Packed '%s' into %d bytes", blueprint.job_title, len(data))
    return data


def export_current(state: BlueprintState) -> bytes:
    """Export the state's current blueprint.

    Raises:
        NoBlueprintError: If nothing has been generated yet.
    """
    return export_as_document(state.current)


def _local_filename(blueprint: Blueprint) -> str:
    name = document_filename(blueprint)
    for sep in {os.sep, "/", os.altsep}:
        if sep:
            name = name.replace(sep, "-")
    return name


def save_document(blueprint: Blueprint, directory: str) -> str:
    """Write the ``.docx`` for ``blueprint`` into ``directory`` and return its path.

    Path separators in the job title are replaced with ``-`` so the file
    always lands directly inside ``directory``.
    """
    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, _local_filename(blueprint))
    with open(path, "wb") as f:
        f.write(export_as_document(blueprint))
    logger.info("Wrote blueprint document to %s", path)
    return path
