"""
Export subsystem.

Packs the current Blueprint into a Word (``.docx``) document for
download or for writing to disk.
"""

from .docx_export import (  # noqa: F401
    DOCX_MIMETYPE,
    document_filename,
    export_as_document,
    export_current,
    save_document,
)
